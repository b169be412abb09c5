from .range import Match, QueryStats, RangeQuery

__all__ = ["Match", "QueryStats", "RangeQuery"]
