from urllib.parse import quote

from flask import current_app


class FollowUpLinks:
    """Prefilled email and WhatsApp drafts offered after a booking is submitted"""

    @staticmethod
    def _details(booking, persons_label, package_label, message_label):
        lines = [
            f"Name: {booking.name}",
            f"Email: {booking.email}",
            f"Phone: {booking.phone}",
            f"Travel Date: {booking.date.isoformat() if booking.date else ''}",
            f"{persons_label}: {booking.persons}",
        ]
        package_name = booking.package.title if booking.package else None
        if package_name:
            lines.append(f"{package_label}: {package_name}")
        if booking.message:
            lines.append("")
            lines.append(f"{message_label}{booking.message}")
        return "\n".join(lines)

    @staticmethod
    def whatsapp_text(booking):
        details = FollowUpLinks._details(booking, "Persons", "Package", "Message: ")
        return (
            "Hello! I just submitted a booking request:\n\n"
            f"{details}\n\n"
            "Please confirm my booking. Thank you!"
        )

    @staticmethod
    def email_subject(booking):
        return f"Booking Request - {booking.name}"

    @staticmethod
    def email_body(booking, agency_name):
        details = FollowUpLinks._details(
            booking, "Number of Persons", "Preferred Package", "Additional Details:\n"
        )
        return (
            f"Hello {agency_name},\n\n"
            "I just submitted a booking request through your website:\n\n"
            f"{details}\n\n"
            "Please confirm my booking at your earliest convenience.\n\n"
            "Thank you!"
        )

    @staticmethod
    def for_booking(booking):
        config = current_app.config
        number = ''.join(ch for ch in str(config['AGENCY_WHATSAPP']) if ch.isdigit())
        email_to = config['AGENCY_EMAIL']

        text = FollowUpLinks.whatsapp_text(booking)
        subject = FollowUpLinks.email_subject(booking)
        body = FollowUpLinks.email_body(booking, config['AGENCY_NAME'])

        return {
            'whatsapp': {
                'number': number,
                'text': text,
                'url': f"https://wa.me/{number}?text={quote(text, safe='')}"
            },
            'email': {
                'to': email_to,
                'subject': subject,
                'body': body,
                'url': f"mailto:{email_to}?subject={quote(subject, safe='')}&body={quote(body, safe='')}"
            }
        }
