"""Unit tests for rendering ORDER BY clauses."""

import pytest
from sqlglot import exp

from querybuilder import (
    ColumnName,
    CompilerConfig,
    Expression,
    OrderByClause,
    OrderByCompiler,
    OrderItem,
    OrderPriority,
    OrderType,
    SQLBuilderError,
    SQLParsingError,
    sort_items,
)


def test_empty_clause_renders_nothing(clause: OrderByClause, compiler: OrderByCompiler) -> None:
    assert compiler.compile(clause) is None
    assert compiler.to_sql(clause) == ""


def test_columns_render_with_directions(clause: OrderByClause, compiler: OrderByCompiler) -> None:
    clause.add_column("name", OrderType.ASC)
    clause.add_column("age", OrderType.DESC)

    assert compiler.to_sql(clause) == "ORDER BY name ASC, age DESC"


def test_random_added_first_renders_first(
    clause: OrderByClause, compiler: OrderByCompiler, rand_expr: Expression
) -> None:
    clause.add_random(rand_expr)
    clause.add_column("name", OrderType.ASC)

    assert compiler.to_sql(clause) == "ORDER BY RAND(), name ASC"


def test_random_added_second_still_renders_first(
    clause: OrderByClause, compiler: OrderByCompiler, rand_expr: Expression
) -> None:
    """Test priority dominates raw insertion order when rendering."""
    clause.add_column("name", OrderType.ASC)
    clause.add_random(rand_expr)

    raw = clause.get_columns()
    assert [item.index for item in raw] == [0, 1]

    ordered = sort_items(raw)
    assert [item.index for item in ordered] == [1, 0]
    assert compiler.to_sql(clause) == "ORDER BY RAND(), name ASC"


def test_same_priority_items_keep_insertion_order(compiler: OrderByCompiler) -> None:
    clause = OrderByClause()
    for name in ("c", "a", "b"):
        clause.add_column(name, OrderType.ASC)

    assert compiler.to_sql(clause) == "ORDER BY c ASC, a ASC, b ASC"


def test_sort_items_handles_unknown_priority_classes() -> None:
    items = [
        OrderItem(ColumnName("a"), OrderType.ASC, OrderPriority.NORMAL, 0),
        OrderItem(ColumnName("b"), OrderType.ASC, 2, 1),
        OrderItem(Expression.random(), None, OrderPriority.RANDOM, 2),
        OrderItem(ColumnName("c"), OrderType.ASC, 2, 3),
    ]

    assert [item.index for item in sort_items(items)] == [1, 3, 2, 0]


def test_compile_builds_ordered_nodes(clause: OrderByClause, compiler: OrderByCompiler, rand_expr: Expression) -> None:
    clause.add_column("name", OrderType.DESC)
    clause.add_random(rand_expr)

    order = compiler.compile(clause)

    assert isinstance(order, exp.Order)
    random_node, name_node = order.expressions
    assert isinstance(random_node, exp.Ordered)
    assert isinstance(random_node.this, exp.Rand)
    assert not random_node.args.get("desc")
    assert name_node.args.get("desc") is True
    assert isinstance(name_node.this, exp.Column)


def test_compile_does_not_mutate_clause(clause: OrderByClause, compiler: OrderByCompiler, rand_expr: Expression) -> None:
    clause.add_column("name", OrderType.ASC)
    clause.add_random(rand_expr)
    before = clause.get_columns()

    compiler.to_sql(clause)
    compiler.to_sql(clause)

    assert clause.get_columns() == before


def test_qualified_and_expression_targets(clause: OrderByClause, compiler: OrderByCompiler) -> None:
    clause.add_column("users.created_at", OrderType.DESC)
    clause.add_column(Expression("LENGTH(name)"), OrderType.ASC)

    assert compiler.to_sql(clause) == "ORDER BY users.created_at DESC, LENGTH(name) ASC"


def test_prebuilt_sqlglot_expression_is_reused_unchanged(clause: OrderByClause, compiler: OrderByCompiler) -> None:
    node = exp.column("score")
    clause.add_column(Expression(node), OrderType.DESC)

    compiler.to_sql(clause)

    assert node.parent is None
    assert compiler.to_sql(clause) == "ORDER BY score DESC"


def test_postgres_dialect_spells_random_function(clause: OrderByClause, rand_expr: Expression) -> None:
    clause.add_column("name", OrderType.ASC)
    clause.add_random(rand_expr)

    compiler = OrderByCompiler(CompilerConfig(dialect="postgres"))

    assert compiler.to_sql(clause) == "ORDER BY RANDOM(), name ASC"


def test_identify_quotes_columns(clause: OrderByClause) -> None:
    clause.add_column("name", OrderType.DESC)

    compiler = OrderByCompiler(CompilerConfig(identify=True))

    assert compiler.to_sql(clause) == 'ORDER BY "name" DESC'


def test_unparseable_expression_raises(clause: OrderByClause, compiler: OrderByCompiler) -> None:
    clause.add_column(Expression("LENGTH(("), OrderType.ASC)

    with pytest.raises(SQLParsingError, match="Could not parse"):
        compiler.to_sql(clause)


def test_unsupported_target_raises(compiler: OrderByCompiler) -> None:
    item = OrderItem(42, OrderType.ASC)  # type: ignore[arg-type]

    with pytest.raises(SQLBuilderError, match="int"):
        compiler.compile_item(item)


def test_plain_string_item_target_renders_as_column(compiler: OrderByCompiler) -> None:
    item = OrderItem("title", OrderType.ASC)

    assert compiler.compile_item(item).sql() == "title ASC"
