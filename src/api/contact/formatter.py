"""Formatting of contact form submissions into email bodies."""

from html import escape

from src.api.contact.models import ContactSubmission

SITE_NAME = "Easy Plant Life"

BRAND_COLOUR = "#2d5016"


def format_subject(submission: ContactSubmission) -> str:
    """Build the subject line for a contact form email.

    :param submission: The validated submission.
    :returns: Subject containing the visitor's name.
    """
    return f"Contact Form: {submission.name}"


def format_contact_html(submission: ContactSubmission) -> str:
    """Build the HTML body for a contact form email.

    All visitor input is HTML-escaped.

    :param submission: The validated submission.
    :returns: HTML document.
    """
    name = escape(submission.name)
    email = escape(submission.email)
    message = escape(submission.message)

    return f"""<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>Contact Form Submission</title>
</head>
<body style="font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto; padding: 20px;">
  <h2 style="color: {BRAND_COLOUR}; margin-bottom: 24px;">New Contact Form Submission</h2>
  <table style="width: 100%; border-collapse: collapse;">
    <tr>
      <td style="padding: 8px 0; font-weight: bold; width: 80px;">Name:</td>
      <td style="padding: 8px 0;">{name}</td>
    </tr>
    <tr>
      <td style="padding: 8px 0; font-weight: bold;">Email:</td>
      <td style="padding: 8px 0;"><a href="mailto:{email}" style="color: {BRAND_COLOUR};">{email}</a></td>
    </tr>
  </table>
  <h3 style="color: {BRAND_COLOUR}; margin-top: 24px; margin-bottom: 12px;">Message:</h3>
  <div style="background-color: #f9f9f7; padding: 16px; border-radius: 8px; white-space: pre-wrap;">{message}</div>
  <hr style="border: none; border-top: 1px solid #e5e5e5; margin: 32px 0;">
  <p style="font-size: 12px; color: #666;">This email was sent from the {SITE_NAME} contact form.</p>
</body>
</html>"""


def format_contact_text(submission: ContactSubmission) -> str:
    """Build the plain text body for a contact form email.

    :param submission: The validated submission.
    :returns: Plain text message.
    """
    lines = [
        "New Contact Form Submission",
        "============================",
        "",
        f"Name: {submission.name}",
        f"Email: {submission.email}",
        "",
        "Message:",
        "--------",
        submission.message,
        "",
        "---",
        f"This email was sent from the {SITE_NAME} contact form.",
    ]
    return "\n".join(lines)
