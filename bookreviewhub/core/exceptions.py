"""Domain exceptions raised by services and translated to HTTP responses in api.errors."""


class BookReviewHubError(Exception):
    """Base exception for all application errors."""

    pass


class InvalidArgumentError(BookReviewHubError):
    """Raised when a request is well-formed but its values are not acceptable."""

    pass


class UsernameTakenError(InvalidArgumentError):
    """Raised when registering a username that already exists."""

    def __init__(self, username: str):
        self.username = username
        super().__init__("Username is already taken")


class EmailTakenError(InvalidArgumentError):
    """Raised when registering an email that already exists."""

    def __init__(self, email: str):
        self.email = email
        super().__init__("Email is already registered")


class BadCredentialsError(BookReviewHubError):
    """
    Raised when a username/password pair does not match a stored account.

    Unknown user and wrong password both raise this with the same message.
    """

    def __init__(self, message: str = "Bad credentials"):
        super().__init__(message)


class AuthenticationRequiredError(BookReviewHubError):
    """Raised when a protected route is reached without an established identity."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class AccessDeniedError(BookReviewHubError):
    """Raised when the current identity lacks the role a route requires."""

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)


class UserNotFoundError(BookReviewHubError):
    """Raised when no user record exists for a username."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"User not found with username: {username}")


class InvalidTokenError(BookReviewHubError):
    """Raised when a bearer token cannot be decoded or carries no subject."""

    pass
