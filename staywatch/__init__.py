"""StayWatch: 90/180-day stay compliance engine and API."""
