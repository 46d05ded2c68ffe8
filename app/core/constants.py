"""
app/core/constants.py

Application-wide fixed constants.

These are part of the HTTP contract with the form page and admin panel
and are NOT configurable via environment variables.
"""

# ── Form field names ───────────────────────────────────────────────────────────

FIELD_FULL_NAME: str = "fullName"
FIELD_EMAIL: str = "email"
FIELD_PHONE: str = "phone"
FIELD_CITY: str = "city"
FIELD_JOB_ROLE: str = "jobRole"
FIELD_NOTES: str = "notes"

#: File fields, in the order they are validated.
FIELD_ID_FRONT: str = "idFront"
FIELD_ID_BACK: str = "idBack"
FIELD_SELFIE_WITH_ID: str = "selfieWithId"

UPLOAD_FIELDS: tuple = (FIELD_ID_FRONT, FIELD_ID_BACK, FIELD_SELFIE_WITH_ID)

# ── Response messages ──────────────────────────────────────────────────────────

MSG_SUBMITTED: str = "Application submitted successfully"
MSG_METHOD_NOT_ALLOWED: str = "Method not allowed"
MSG_PAYLOAD_TOO_LARGE: str = "File is too large"
MSG_INVALID_FORM: str = "Invalid multipart/form-data payload"
MSG_STORE_WRITE_FAILED: str = "Error storing user data"
MSG_STORE_READ_FAILED: str = "Error retrieving user data"
MSG_NOT_FOUND: str = "Not found"

# ── CORS ───────────────────────────────────────────────────────────────────────

CORS_ALLOWED_METHODS: list = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
CORS_ALLOWED_HEADERS: list = ["Content-Type", "Authorization"]

# ── Static pages ───────────────────────────────────────────────────────────────

FORM_PAGE: str = "index.html"
ADMIN_PAGE: str = "adminpanel.html"
HTML_CONTENT_TYPE: str = "text/html; charset=utf-8"
