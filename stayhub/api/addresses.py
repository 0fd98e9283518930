"""Address book endpoints of the logged-in user."""

from typing import List

from stayhub.api.client import BaseResource
from stayhub.schemas.address import Address, AddressCreate, AddressUpdate


class AddressesApi(BaseResource):

    async def list_my_addresses(self) -> List[Address]:
        return await self.client.get(
            "/addresses/my-addresses",
            response_model=List[Address],
            fallback_message="Failed to fetch addresses",
        )

    async def add_address(self, data: AddressCreate) -> Address:
        return await self.client.post(
            "/addresses/my-addresses",
            json=data,
            response_model=Address,
            fallback_message="Failed to add address",
        )

    async def update_address(self, address_id: int, data: AddressUpdate) -> Address:
        return await self.client.put(
            f"/addresses/my-addresses/{address_id}",
            json=data,
            response_model=Address,
            fallback_message="Failed to update address",
        )

    async def delete_address(self, address_id: int) -> None:
        await self.client.delete(
            f"/addresses/my-addresses/{address_id}",
            fallback_message="Failed to delete address",
        )

    async def set_default_address(self, address_id: int) -> Address:
        return await self.update_address(address_id, AddressUpdate(is_default=True))
