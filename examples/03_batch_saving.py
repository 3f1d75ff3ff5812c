"""
Example 03: Batch Saving

This example demonstrates asserting that expected inserts, updates and
deletes were sent in a batch.
"""

from query_mock import (
    DataProviderMock,
    DeleteQuery,
    Filter,
    InsertQuery,
    MockNotReceivedError,
    SavingOperation,
    UpdateQuery,
    where,
)


def main():
    provider = DataProviderMock()

    created = provider.mock_saving_item("Contact", SavingOperation.INSERT).changed_value_has(
        "Name", "Alice"
    )
    renamed = (
        provider.mock_saving_item("Contact", SavingOperation.UPDATE)
        .changed_value_has("Name", "Alicia")
        .filter_has("Id", 1)
    )
    removed = provider.mock_saving_item("Contact", SavingOperation.DELETE).filter_has("Id", 2)

    response = provider.batch_execute(
        [
            InsertQuery("Contact", {"Name": "Alice", "City": "Paris"}),
            UpdateQuery("Contact", {"Name": "Alicia"}, where(Filter("Id", 1))),
        ]
    )

    print("=== Batch Saving ===\n")
    print(f"Batch success: {response.success}")
    print(f"Insert received: {created.received}")
    print(f"Update received: {renamed.received}")
    print(f"Delete received: {removed.received}")

    try:
        provider.verify_all_received()
    except MockNotReceivedError as e:
        print(f"\nVerification failed as expected:\n{e}")

    provider.batch_execute([DeleteQuery("Contact", where(Filter("Id", 2)))])
    provider.verify_all_received()
    print("\nAll expectations received")


if __name__ == "__main__":
    main()
