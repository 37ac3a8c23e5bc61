"""PDF export endpoint.

Receipts are rendered to PDF in the browser; the server only acknowledges
the request so older clients that still call it keep working.
"""

from fastapi import APIRouter

from receipt_api.models.schemas import MessageResponse

router = APIRouter(tags=["pdf"])


@router.post("/generate-pdf", response_model=MessageResponse)
async def generate_pdf() -> MessageResponse:
    return MessageResponse(message="PDF generation handled client-side")
