"""Verification artifacts: scannable-code URLs embedding a ticket's id."""

from ticketing.domain import TicketId

DEFAULT_QR_URL_TEMPLATE = (
    "https://api.qrserver.com/v1/create-qr-code/?size=150x150&data=ticket-{ticket_id}"
)


class QrCodeUrlBuilder:
    """Builds the QR code URL shown on a ticket and scanned at the door."""

    def __init__(self, template: str = DEFAULT_QR_URL_TEMPLATE) -> None:
        if "{ticket_id}" not in template:
            raise ValueError("QR code URL template must contain {ticket_id}")
        self._template = template

    def __call__(self, ticket_id: TicketId) -> str:
        return self._template.format(ticket_id=ticket_id.value)
