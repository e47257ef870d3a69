"""Builders para mensagens interativas (reply buttons e list)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.domain.outbound_messages import (
    ButtonAction,
    ButtonInteractive,
    InteractiveText,
    ListAction,
    ListHeader,
    ListInteractive,
    ListRow,
    ListSection,
    OutboundInteractiveButton,
    OutboundInteractiveList,
    ReplyButton,
    ReplyDetail,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


def build_reply_buttons_message(
    to: str,
    body: str,
    buttons: Iterable[tuple[str, str]],
) -> OutboundInteractiveButton:
    """Monta mensagem com botões de resposta rápida.

    Args:
        to: Número de destino
        body: Texto exibido acima dos botões
        buttons: Pares (id, title) na ordem de exibição
    """
    return OutboundInteractiveButton(
        to=to,
        interactive=ButtonInteractive(
            body=InteractiveText(text=body),
            action=ButtonAction(
                buttons=[
                    ReplyButton(reply=ReplyDetail(id=button_id, title=title))
                    for button_id, title in buttons
                ]
            ),
        ),
    )


def build_list_message(
    to: str,
    header: str,
    body: str,
    footer: str,
    button: str,
    sections: Mapping[str, Iterable[tuple[str, str, str]]],
) -> OutboundInteractiveList:
    """Monta mensagem de lista.

    Args:
        sections: título da seção → linhas (id, title, description), em ordem
    """
    return OutboundInteractiveList(
        to=to,
        interactive=ListInteractive(
            header=ListHeader(text=header),
            body=InteractiveText(text=body),
            footer=InteractiveText(text=footer),
            action=ListAction(
                button=button,
                sections=[
                    ListSection(
                        title=title,
                        rows=[
                            ListRow(id=row_id, title=row_title, description=description)
                            for row_id, row_title, description in rows
                        ],
                    )
                    for title, rows in sections.items()
                ],
            ),
        ),
    )
