"""Business logic: authentication flows and the book catalogue."""
