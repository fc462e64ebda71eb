"""Personalized opt-out letter generation."""

from datetime import date
from typing import Optional

from app.models.broker import DataBroker
from app.models.exposure import Exposure
from app.models.user import User


def format_letter_date(day: date) -> str:
    """US style date without zero padding, e.g. 3/7/2025."""
    return f"{day.month}/{day.day}/{day.year}"


def _exposed_data_text(exposed_data) -> str:
    if isinstance(exposed_data, (list, tuple)):
        return ", ".join(str(item) for item in exposed_data)
    return str(exposed_data)


def generate_removal_form(
    broker: DataBroker,
    user: User,
    exposure: Exposure,
    today: Optional[date] = None,
) -> str:
    """Generate the removal request letter for one exposure."""
    full_name = user.full_name
    full_address = f"{user.current_address}, {user.city}, {user.state} {user.zip_code}"
    previous_addresses = (
        f"- Previous Addresses: {user.previous_addresses}" if user.previous_addresses else ""
    )
    letter_date = format_letter_date(today or date.today())

    return f"""Subject: Data Removal Request - {full_name}

Dear {broker.name} Privacy Team,

I am writing to request the immediate removal of my personal information from your database. I have discovered that my information is being displayed on your website without my consent.

Personal Information to be Removed:
- Full Name: {full_name}
- Current Address: {full_address}
- Email: {user.email}
- Phone: {user.phone}
- Date of Birth: {user.date_of_birth}
{previous_addresses}

Profile URL (if applicable): {exposure.profile_url or 'N/A'}

Exposed Data Found: {_exposed_data_text(exposure.exposed_data)}

I am exercising my rights under applicable privacy laws, including but not limited to CCPA, GDPR, and other state/federal privacy regulations. I request that you:

1. Remove all of my personal information from your public-facing website
2. Remove my information from your internal databases
3. Do not sell, share, or distribute my personal information to third parties
4. Confirm in writing that my information has been removed

Please process this request within the timeframe required by law and confirm removal via email at {user.email}.

Thank you for your prompt attention to this matter.

Sincerely,
{full_name}
{letter_date}"""


def build_removal_form(broker: DataBroker, user: User, exposure: Exposure) -> dict:
    """Prefilled removal form: broker summary, user data and the letter."""
    return {
        "broker": {
            "name": broker.name,
            "url": broker.url,
            "opt_out_url": broker.opt_out_url,
            "opt_out_process": broker.opt_out_process,
            "estimated_processing_time": broker.estimated_processing_time,
            "difficulty_rating": broker.difficulty_rating,
        },
        "user_data": {
            "first_name": user.first_name,
            "last_name": user.last_name,
            "full_name": user.full_name,
            "email": user.email,
            "phone": user.phone,
            "date_of_birth": user.date_of_birth,
            "current_address": user.current_address,
            "city": user.city,
            "state": user.state,
            "zip_code": user.zip_code,
            "previous_addresses": user.previous_addresses,
        },
        "exposed_data": exposure.exposed_data,
        "profile_url": exposure.profile_url,
        "required_info": broker.required_info,
        "form_template": generate_removal_form(broker, user, exposure),
    }
