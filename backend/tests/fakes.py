from __future__ import annotations

from backend.recommendations.models import MenuItem, Vendor


class FakeCatalog:
    def __init__(self, items: list[MenuItem]) -> None:
        self.items = items

    def list_menu_items(self) -> list[MenuItem]:
        return list(self.items)


class FakeVendors:
    def __init__(self, vendors: list[Vendor]) -> None:
        self.vendors = {v.id: v for v in vendors}
        self.lookups: list[str] = []

    def get_vendor(self, vendor_id: str) -> Vendor | None:
        self.lookups.append(vendor_id)
        return self.vendors.get(vendor_id)

    def list_vendors(self) -> list[Vendor]:
        return list(self.vendors.values())


class FakeModel:
    def __init__(self, response: str = "[]") -> None:
        self.response = response
        self.prompts: list[str] = []

    def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.response


SAMPLE_MENU = [
    MenuItem(id="1", title="Veg Burger", description="Grilled patty", avail_time="lunch", rating=4.3, vendor_id="v1"),
    MenuItem(id="2", title="Masala Dosa", description="Rice crepe", avail_time="breakfast", rating=4.6, vendor_id="v2"),
    MenuItem(id="3", title="Idli", description="Steamed veg-friendly cakes", avail_time="Breakfast", rating=3.9, vendor_id="v2"),
    MenuItem(id="4", title="Chicken Biryani", description="Basmati rice", avail_time="dinner", rating=4.7, vendor_id="v3"),
    MenuItem(id="5", title="Paneer Tikka", avail_time="dinner", rating=4.1, vendor_id="missing"),
    MenuItem(id="6", title="Veg Thali", description="Rice and dal", avail_time="lunch", rating=4.0, vendor_id="v1"),
    MenuItem(id="7", title="Samosa", avail_time="snacks", rating=None, vendor_id="v4"),
]

SAMPLE_VENDORS = [
    Vendor(id="v1", name="Burger Barn", latitude=12.9352, longitude=77.6245),
    Vendor(id="v2", name="Udupi Corner", latitude=12.9166, longitude=77.6101),
    Vendor(id="v3", name="Spice Route", latitude=12.9719, longitude=77.6412),
    Vendor(id="v4", name="No Location Stall"),
]
