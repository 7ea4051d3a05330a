"""
Email templates for submission confirmations and admin notifications.

Templates are looked up by (submission kind, recipient). Every builder
takes the submission as a plain dict and returns an EmailTemplate.
"""
import enum
from dataclasses import dataclass
from html import escape
from typing import Callable, Dict, Tuple

from leadcapture.config import settings
from leadcapture.models.columns import utcnow


class SubmissionKind(str, enum.Enum):
    CONTACT = "contact"
    CONSULTATION = "consultation"
    SERVICE = "service"


class Recipient(str, enum.Enum):
    USER = "user"
    ADMIN = "admin"


@dataclass(frozen=True)
class EmailTemplate:
    subject: str
    html: str
    text: str


TemplateBuilder = Callable[[dict], EmailTemplate]


def _e(data: dict, key: str, default: str = "") -> str:
    """HTML-escaped field value."""
    value = data.get(key)
    return escape(str(value)) if value not in (None, "") else default


def _t(data: dict, key: str, default: str = "") -> str:
    """Plain-text field value."""
    value = data.get(key)
    return str(value) if value not in (None, "") else default


def _label(value) -> str:
    return str(value or "").replace("_", " ")


def _budget_label(value) -> str:
    return str(value or "").replace("_", "-").upper()


def _service_label(value) -> str:
    return str(value or "").replace("_", " ").upper()


def _joined(values) -> str:
    return ", ".join(values or [])


def _now() -> str:
    return utcnow().strftime("%Y-%m-%d %H:%M:%S")


def _wrap(title: str, body: str) -> str:
    return f"""
        <!DOCTYPE html>
        <html>
        <head>
            <meta charset="utf-8">
            <title>{title}</title>
        </head>
        <body style="font-family: Arial, sans-serif; line-height: 1.6; color: #333;">
            <div style="max-width: 600px; margin: 0 auto; padding: 20px;">
                {body}
            </div>
        </body>
        </html>
    """


# =============================================================================
# CONTACT
# =============================================================================

def contact_user_template(data: dict) -> EmailTemplate:
    app_name = settings.APP_NAME
    app_url = settings.APP_URL
    company = f"<p><strong>Company:</strong> {_e(data, 'company')}</p>" if data.get("company") else ""
    phone = f"<p><strong>Phone:</strong> {_e(data, 'phone')}</p>" if data.get("phone") else ""

    html = _wrap(f"Thank you for contacting {escape(app_name)}", f"""
        <h1>Thank You for Reaching Out!</h1>
        <p>Hi {_e(data, 'name')},</p>
        <p>Thank you for contacting <strong>{escape(app_name)}</strong>! We've received your inquiry
        and our team is already reviewing your message.</p>
        <h3>Your Inquiry Details:</h3>
        <p><strong>Subject:</strong> {_e(data, 'subject')}</p>
        <p><strong>Message:</strong> {_e(data, 'message')}</p>
        {company}
        {phone}
        <p>We'll contact you within 24 hours to discuss your needs.</p>
        <p><a href="{escape(app_url)}/services.html">View Our AI Solutions</a></p>
        <p>Best regards,<br><strong>The {escape(app_name)} Team</strong></p>
    """)

    text = f"""
Thank you for contacting {app_name}!

Hi {_t(data, 'name')},

We've received your inquiry about: {_t(data, 'subject')}

Your message: {_t(data, 'message')}

Our team will contact you within 24 hours.

Best regards,
The {app_name} Team

Visit us: {app_url}
"""
    return EmailTemplate(f"Thank you for contacting {app_name}", html, text)


def contact_admin_template(data: dict) -> EmailTemplate:
    submitted = _now()
    html = f"""
        <h2>New Contact Form Submission</h2>
        <p><strong>Priority:</strong> {_e(data, 'priority', 'medium').upper()}</p>
        <p><strong>Name:</strong> {_e(data, 'name')}</p>
        <p><strong>Email:</strong> {_e(data, 'email')}</p>
        <p><strong>Phone:</strong> {_e(data, 'phone', 'Not provided')}</p>
        <p><strong>Company:</strong> {_e(data, 'company', 'Not provided')}</p>
        <p><strong>Subject:</strong> {_e(data, 'subject')}</p>
        <p><strong>Message:</strong></p>
        <blockquote style="background: #f5f5f5; padding: 15px; border-left: 4px solid #667eea;">{_e(data, 'message')}</blockquote>
        <p><strong>Submitted:</strong> {submitted}</p>
        <p><strong>IP Address:</strong> {_e(data, 'ip_address', 'Unknown')}</p>
    """
    text = f"""
New Contact Form Submission

Name: {_t(data, 'name')}
Email: {_t(data, 'email')}
Phone: {_t(data, 'phone', 'Not provided')}
Company: {_t(data, 'company', 'Not provided')}
Subject: {_t(data, 'subject')}

Message:
{_t(data, 'message')}

Submitted: {submitted}
"""
    return EmailTemplate(f"New Contact Form Submission - {_t(data, 'name')}", html, text)


# =============================================================================
# CONSULTATION
# =============================================================================

def consultation_user_template(data: dict) -> EmailTemplate:
    app_name = settings.APP_NAME
    services = _joined(data.get("interested_services"))

    html = _wrap("Free Consultation Booked", f"""
        <h1>Free Consultation Booked!</h1>
        <p>Hi {_e(data, 'name')},</p>
        <p>We're excited to help <strong>{_e(data, 'company')}</strong> leverage AI for growth.</p>
        <h3>Your Consultation Details:</h3>
        <p><strong>Company:</strong> {_e(data, 'company')}</p>
        <p><strong>Industry:</strong> {_e(data, 'industry', 'Not specified')}</p>
        <p><strong>Business Size:</strong> {_e(data, 'business_size')} employees</p>
        <p><strong>Budget Range:</strong> {escape(_budget_label(data.get('budget')))}</p>
        <p><strong>Timeline:</strong> {escape(_label(data.get('timeline')))}</p>
        <p><strong>Interested Services:</strong> {escape(services)}</p>
        <p><strong>Preferred Contact:</strong> {_e(data, 'preferred_contact_method')}</p>
        <p><strong>Next Steps:</strong></p>
        <ol>
            <li>Our AI consultant will contact you within 4 hours</li>
            <li>We'll schedule your consultation at your preferred time</li>
            <li>Prepare any questions about AI automation for your business</li>
        </ol>
        <p>Best regards,<br><strong>The {escape(app_name)} Consulting Team</strong></p>
    """)

    text = f"""
Free Consultation Booked - {app_name}

Hi {_t(data, 'name')},

Your free consultation has been successfully booked for {_t(data, 'company')}!

Details:
- Business Size: {_t(data, 'business_size')} employees
- Budget: {_t(data, 'budget')}
- Timeline: {_t(data, 'timeline')}
- Services: {services}

Our consultant will contact you within 4 hours to schedule your session.

Best regards,
The {app_name} Team
"""
    return EmailTemplate(f"Free Consultation Booked - {app_name}", html, text)


def consultation_admin_template(data: dict) -> EmailTemplate:
    services = _joined(data.get("interested_services"))
    lead_score = _t(data, "lead_score", "N/A")
    priority = _t(data, "priority", "medium").upper()
    notes = (
        f"<p><strong>Notes:</strong> {_e(data, 'additional_notes')}</p>"
        if data.get("additional_notes") else ""
    )

    html = f"""
        <h2>New Free Consultation Booking</h2>
        <p><strong>Lead Score:</strong> {escape(lead_score)}/100</p>
        <p><strong>Priority:</strong> {escape(priority)}</p>
        <hr>
        <p><strong>Name:</strong> {_e(data, 'name')}</p>
        <p><strong>Email:</strong> {_e(data, 'email')}</p>
        <p><strong>Phone:</strong> {_e(data, 'phone')}</p>
        <p><strong>Company:</strong> {_e(data, 'company')}</p>
        <p><strong>Industry:</strong> {_e(data, 'industry', 'Not specified')}</p>
        <p><strong>Business Size:</strong> {_e(data, 'business_size')} employees</p>
        <p><strong>Budget:</strong> {escape(_budget_label(data.get('budget')))}</p>
        <p><strong>Timeline:</strong> {escape(_label(data.get('timeline')))}</p>
        <p><strong>Services:</strong> {escape(services)}</p>
        <p><strong>Challenges:</strong></p>
        <blockquote style="background: #f5f5f5; padding: 15px; border-left: 4px solid #667eea;">{_e(data, 'current_challenges')}</blockquote>
        <p><strong>Contact Preference:</strong> {_e(data, 'preferred_contact_method')}</p>
        <p><strong>Time Preference:</strong> {_e(data, 'preferred_time')}</p>
        {notes}
        <p><strong>Submitted:</strong> {_now()}</p>
    """
    text = f"""
New Consultation Booking - {_t(data, 'company')}
Lead Score: {lead_score}/100
Priority: {priority}

Contact: {_t(data, 'name')} ({_t(data, 'email')}, {_t(data, 'phone')})
Company: {_t(data, 'company')} ({_t(data, 'business_size')} employees)
Industry: {_t(data, 'industry', 'Not specified')}
Budget: {_t(data, 'budget')}
Timeline: {_t(data, 'timeline')}
Services: {services}

Challenges: {_t(data, 'current_challenges')}

Contact via: {_t(data, 'preferred_contact_method')} ({_t(data, 'preferred_time')})
"""
    subject = f"New Consultation Booking - {_t(data, 'company')} (Lead Score: {lead_score})"
    return EmailTemplate(subject, html, text)


# =============================================================================
# SERVICE INQUIRY
# =============================================================================

def service_user_template(data: dict) -> EmailTemplate:
    app_name = settings.APP_NAME
    app_url = settings.APP_URL
    service = _service_label(data.get("service_type"))
    company = f"<p><strong>Company:</strong> {_e(data, 'company')}</p>" if data.get("company") else ""

    html = _wrap("Service Inquiry Received", f"""
        <h1>Service Inquiry Received!</h1>
        <p>Hi {_e(data, 'name')},</p>
        <p>Thank you for your interest in our <strong>{escape(service)}</strong> service!</p>
        <h3>Your Project Details:</h3>
        <p><strong>Service:</strong> {escape(service)}</p>
        <p><strong>Budget:</strong> {escape(_budget_label(data.get('budget')))}</p>
        <p><strong>Timeline:</strong> {escape(_label(data.get('timeline')))}</p>
        {company}
        <p><strong>Project Description:</strong> {_e(data, 'project_description')}</p>
        <p>Our specialists will review your requirements and prepare a detailed quote within 48 hours.</p>
        <p><a href="{escape(app_url)}/services.html">View Our Portfolio</a></p>
        <p>Best regards,<br><strong>The {escape(app_name)} Development Team</strong></p>
    """)

    text = f"""
Service Inquiry Received - {app_name}

Hi {_t(data, 'name')},

We've received your inquiry for: {service}

Project: {_t(data, 'project_description')}
Budget: {_t(data, 'budget')}
Timeline: {_t(data, 'timeline')}

Our team will review your requirements and send you a detailed quote within 48 hours.

Best regards,
The {app_name} Team
"""
    return EmailTemplate(f"Service Inquiry Received - {service}", html, text)


def service_admin_template(data: dict) -> EmailTemplate:
    service = _service_label(data.get("service_type"))
    estimated_value = data.get("estimated_value")
    value = f"{estimated_value:,.2f}" if isinstance(estimated_value, (int, float)) else "TBD"
    priority = _t(data, "priority", "medium").upper()
    challenges = (
        f"<p><strong>Current Challenges:</strong> {_e(data, 'current_challenges')}</p>"
        if data.get("current_challenges") else ""
    )
    submitted = _now()

    html = f"""
        <h2>New Service Inquiry</h2>
        <p><strong>Service:</strong> {escape(service)}</p>
        <p><strong>Estimated Value:</strong> ${value}</p>
        <p><strong>Priority:</strong> {escape(priority)}</p>
        <hr>
        <p><strong>Name:</strong> {_e(data, 'name')}</p>
        <p><strong>Email:</strong> {_e(data, 'email')}</p>
        <p><strong>Phone:</strong> {_e(data, 'phone', 'Not provided')}</p>
        <p><strong>Company:</strong> {_e(data, 'company', 'Not provided')}</p>
        <p><strong>Budget:</strong> {escape(_budget_label(data.get('budget')))}</p>
        <p><strong>Timeline:</strong> {escape(_label(data.get('timeline')))}</p>
        <p><strong>Current Website:</strong> {_e(data, 'current_website', 'Not provided')}</p>
        <p><strong>Additional Services:</strong> {escape(_joined(data.get('additional_services')) or 'None')}</p>
        <p><strong>Project Description:</strong></p>
        <blockquote style="background: #f5f5f5; padding: 15px; border-left: 4px solid #667eea;">{_e(data, 'project_description')}</blockquote>
        {challenges}
        <p><strong>Submitted:</strong> {submitted}</p>
    """
    text = f"""
New Service Inquiry - {service}
Estimated Value: ${value}
Priority: {priority}

Contact: {_t(data, 'name')} ({_t(data, 'email')})
Company: {_t(data, 'company', 'Not provided')}
Budget: {_t(data, 'budget')}
Timeline: {_t(data, 'timeline')}

Project: {_t(data, 'project_description')}

Submitted: {submitted}
"""
    return EmailTemplate(f"New Service Inquiry - {service} (Est. Value: ${value})", html, text)


TEMPLATES: Dict[Tuple[SubmissionKind, Recipient], TemplateBuilder] = {
    (SubmissionKind.CONTACT, Recipient.USER): contact_user_template,
    (SubmissionKind.CONTACT, Recipient.ADMIN): contact_admin_template,
    (SubmissionKind.CONSULTATION, Recipient.USER): consultation_user_template,
    (SubmissionKind.CONSULTATION, Recipient.ADMIN): consultation_admin_template,
    (SubmissionKind.SERVICE, Recipient.USER): service_user_template,
    (SubmissionKind.SERVICE, Recipient.ADMIN): service_admin_template,
}


def render_template(
    kind: SubmissionKind,
    recipient: Recipient,
    data: dict,
    templates: Dict[Tuple[SubmissionKind, Recipient], TemplateBuilder] = TEMPLATES
) -> EmailTemplate:
    """Build the email for (kind, recipient), falling back to the contact confirmation."""
    builder = templates.get((kind, recipient), contact_user_template)
    return builder(data)
