"""
Waktunya Puasa - Ramadan fasting check-in service.

Feature packages:
- ramadan: configured Ramadan windows and day listing
- checkin: write-once daily fasting check-ins
- progress: fasting progress summary for a window
"""
