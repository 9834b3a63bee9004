#!/usr/bin/env python
import os
from sdk.pystore import StoreClient

def main():
    c = StoreClient(base_url=os.getenv("PRODUCT_API_URL", "http://127.0.0.1:3000"))

    print(c.welcome())

    # -----------------------------
    # List seeded products
    # -----------------------------
    print("\nListing products...")
    print(c.list_products())

    # -----------------------------
    # Search / filter / paginate
    # -----------------------------
    print("\nSearching for 'phone'...")
    print(c.list_products(search="phone"))

    print("\nFirst electronics product...")
    print(c.list_products(category="Electronics", page=1, limit=1))

    # -----------------------------
    # Create, update, delete
    # -----------------------------
    print("\nCreating product...")
    created = c.create_product("Kettle", "Electric kettle, 1.7L", 35, "kitchen", True)
    print(created)

    print("\nChanging its price...")
    print(c.update_product(created["id"], price=29))

    print("\nStats...")
    print(c.stats())

    print("\nDeleting it again...")
    print(c.delete_product(created["id"]))

if __name__ == "__main__":
    main()
