"""Domain errors raised by the catalog, cart and order services"""


class WineMarketError(Exception):
    """Base class for all service-level errors."""

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


# --- Not Found Errors ---

class NotFoundError(WineMarketError):
    """A referenced wine, cart item or order does not exist."""

    status_code = 404


class WineNotFoundError(NotFoundError):
    def __init__(self, wine_id):
        super().__init__("Wine not found")
        self.wine_id = wine_id


class CartItemNotFoundError(NotFoundError):
    def __init__(self, wine_id):
        super().__init__("Item not found in cart")
        self.wine_id = wine_id


class OrderNotFoundError(NotFoundError):
    def __init__(self, order_id: str):
        super().__init__("Order not found")
        self.order_id = order_id


# --- Validation Errors ---

class ValidationError(WineMarketError):
    """A request is missing required data or carries an unusable value."""

    status_code = 400


class OrderStateError(ValidationError):
    """Raised when an order transition is not allowed from its current status."""


# --- Data Errors ---

class DataLoadError(WineMarketError):
    """The catalog source is unreadable or malformed. Absorbed by the catalog store."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Could not load catalog from '{path}': {reason}")
        self.path = path
