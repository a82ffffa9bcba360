"""
Dramatiq actors.

- email_delivery: deliver_email (SMTP)
- session_cleanup: purge_expired_sessions
"""
