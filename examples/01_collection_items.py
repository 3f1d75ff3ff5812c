"""
Example 01: Collection Items

This example demonstrates registering collection mocks and answering
select queries from them.
"""

from query_mock import Column, DataProviderMock, Filter, SelectQuery, where


def contacts_named(name):
    return SelectQuery(
        "Contact",
        columns=(Column("Id"), Column("Name")),
        filters=where(Filter("Name", name)),
    )


def main():
    provider = DataProviderMock()

    # Specific expectation first, wildcard fallback second
    alice = provider.mock_items("Contact").filter_has("Name", "Alice").returns(
        [{"Id": 1, "Name": "Alice"}]
    )
    anyone = provider.mock_items("Contact").returns([])

    print("=== Collection Items ===\n")

    response = provider.get_items(contacts_named("Alice"))
    print(f"Alice query rows: {response.rows}")

    response = provider.get_items(contacts_named("Bob"))
    print(f"Bob query rows: {response.rows} (answered by the wildcard)")

    print(f"\nAlice mock received {alice.received_count} time(s)")
    print(f"Wildcard mock received {anyone.received_count} time(s)")

    # Schemas without any registration are simply not answered
    response = provider.get_items(SelectQuery("Account", columns=(Column("Id"),)))
    print(f"\nUnmocked Account query: {response}")


if __name__ == "__main__":
    main()
