# utils/email.py
import os

import requests
from dotenv import load_dotenv

load_dotenv()

BREVO_KEY = os.getenv("BREVO_API_KEY")


def is_configured() -> bool:
     return bool(BREVO_KEY)


def send_welcome_email(to_email: str, first_name: str):
     if not BREVO_KEY:
          raise RuntimeError("BREVO_API_KEY is not set")

     response = requests.post(
          "https://api.brevo.com/v3/smtp/email",
          headers={
               "api-key": BREVO_KEY,
               "Content-Type": "application/json",
          },
          json={
               "sender": {"name": "Adora", "email": "noreply@adora.in"},
               "to": [{"email": to_email}],
               "subject": "Welcome to Adora",
               "htmlContent": f"""
                    <h2>Welcome to Adora, {first_name}!</h2>
                    <p>Your account is ready. List your building or vehicle spaces,
                    or discover premium advertising opportunities across India.</p>
               """,
          },
          timeout=10,
     )
     if response.status_code not in (200, 201):
          raise RuntimeError(f"Brevo error: {response.text}")
