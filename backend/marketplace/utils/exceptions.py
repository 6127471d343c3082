class MarketplaceError(Exception):
    """Base exception for errors that map onto an API error envelope."""

    status_code: int = 400
    code: str = "BAD_REQUEST"

    def __init__(self, message: str, details: object = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class NotFoundError(MarketplaceError):
    status_code = 404
    code = "NOT_FOUND"


class ApartmentNotFoundError(NotFoundError):
    pass


class LandPropertyNotFoundError(NotFoundError):
    pass


class HouseForSaleNotFoundError(NotFoundError):
    pass


class SellerPropertiesNotFoundError(NotFoundError):
    pass


class ForbiddenError(MarketplaceError):
    status_code = 403
    code = "FORBIDDEN"


class InvalidRequestError(MarketplaceError):
    code = "VALIDATION_ERROR"
