"""Training Scheduler package.

Organized by feature modules (users, sessions, attendance, categories, analytics)
with a thin Flask controller layer over service/repository layers.
"""
