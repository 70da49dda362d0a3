"""Query builder mixins."""

from querybuilder.builder._order_by import OrderByClauseMixin, OrderBySpec

__all__ = ("OrderByClauseMixin", "OrderBySpec")
