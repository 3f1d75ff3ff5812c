"""
Example 02: Scalar Aggregates and Default Values

This example demonstrates count/sum mocks and schema default values.
"""

from query_mock import AggregationType, Column, DataProviderMock, Filter, SelectQuery, where


def main():
    provider = DataProviderMock()

    provider.mock_scalar("Invoice", AggregationType.COUNT).returns(7)
    provider.mock_scalar("Invoice", AggregationType.SUM).filter_has("Status", "Paid").returns(
        1250.0
    )
    provider.mock_default_values("Invoice").returns({"Status": "Draft", "Currency": "EUR"})

    print("=== Scalar Aggregates ===\n")

    count = provider.get_items(
        SelectQuery("Invoice", columns=(Column("Id", AggregationType.COUNT),))
    )
    print(f"COUNT(Id): {count.scalar}")

    total = provider.get_items(
        SelectQuery(
            "Invoice",
            columns=(Column("Amount", AggregationType.SUM),),
            filters=where(Filter("Status", "Paid")),
        )
    )
    print(f"SUM(Amount) where Status = 'Paid': {total.scalar}")

    # MAX was never registered: no fallback to collection mocks
    maximum = provider.get_items(
        SelectQuery("Invoice", columns=(Column("Amount", AggregationType.MAX),))
    )
    print(f"MAX(Amount): {maximum}")

    print("\n=== Default Values ===\n")
    defaults = provider.get_default_values("Invoice")
    print(f"Invoice defaults: {defaults.values}")


if __name__ == "__main__":
    main()
