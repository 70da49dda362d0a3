import pytest

from querybuilder import OrderPriority, OrderType, SQLBuilderError


@pytest.mark.parametrize("value", ["asc", "ASC", " Asc ", OrderType.ASC])
def test_order_type_from_string_ascending(value: "str | OrderType") -> None:
    assert OrderType.from_string(value) is OrderType.ASC


@pytest.mark.parametrize("value", ["desc", "DESC", "dEsC"])
def test_order_type_from_string_descending(value: str) -> None:
    assert OrderType.from_string(value) is OrderType.DESC
    assert OrderType.from_string(value).is_descending


@pytest.mark.parametrize("value", ["", "ascending", "up", None, 1])
def test_order_type_from_string_rejects_unknown(value: object) -> None:
    with pytest.raises(SQLBuilderError, match="Invalid sort direction"):
        OrderType.from_string(value)  # type: ignore[arg-type]


def test_order_type_str() -> None:
    assert str(OrderType.DESC) == "DESC"
    assert OrderType.ASC == "ASC"


def test_priority_ranking() -> None:
    assert OrderPriority.NORMAL == 0
    assert OrderPriority.RANDOM == 1
    assert OrderPriority.RANDOM.rank > OrderPriority.NORMAL.rank
    assert OrderPriority.rank_of(7) == 7
    assert OrderPriority.rank_of(OrderPriority.RANDOM) == 1
