"""
auth — User authentication module.

Provides:
  • Password hashing (bcrypt)
  • Access / refresh token creation & verification
  • Credential store over the ``users`` table
  • Register / login / refresh / logout service and API routes
  • ``get_current_user_id`` FastAPI dependency
"""
