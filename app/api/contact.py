from fastapi import APIRouter, Depends

from app.api.deps import get_mail_service
from app.schemas.contact import ContactMessage
from app.services.mail_service import MailService

router = APIRouter()


@router.post("/contactus")
async def contact_us(
    payload: ContactMessage,
    mail: MailService = Depends(get_mail_service),
):
    """Relays a contact form submission to the support mailbox."""
    await mail.send_contact_message(payload.name, payload.email, payload.message)
    return {"message": "Email sent successfully"}
