from __future__ import annotations

import pytest

from querybuilder import Expression, OrderByClause, OrderByCompiler


@pytest.fixture
def clause() -> OrderByClause:
    return OrderByClause()


@pytest.fixture
def compiler() -> OrderByCompiler:
    return OrderByCompiler()


@pytest.fixture
def rand_expr() -> Expression:
    return Expression.random()
