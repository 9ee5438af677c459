"""BookReviewHub backend: user registration, login and JWT-protected API."""
