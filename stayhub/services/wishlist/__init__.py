from stayhub.services.wishlist.base import WishlistService
from stayhub.services.wishlist.local import LocalWishlistService
from stayhub.services.wishlist.remote import HttpWishlistService

__all__ = ["WishlistService", "LocalWishlistService", "HttpWishlistService"]
