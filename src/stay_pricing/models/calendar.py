"""Calendar models: per-date overrides, resolved nights and month views."""

import datetime as dt
from collections.abc import Iterable, Iterator, Mapping
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .enums import PriceType


class CalendarOverride(BaseModel):
    """A calendar entry pinning one date of one scope to a status/price.

    Scope is a property or a specific room. When price is omitted the
    resolver derives it from the type and the pricing profile.
    """

    scope_id: str = Field(..., description="Property or room identifier", examples=["property-42"])
    date: dt.date = Field(..., description="Calendar date (YYYY-MM-DD)", examples=["2025-06-01"])
    type: PriceType = Field(..., description="Status tag for the date", examples=["best_deal"])
    price: Optional[int] = Field(
        default=None,
        ge=0,
        description="Explicit nightly price in cents, overriding the tier price",
    )


class OverrideRange(BaseModel):
    """A bulk calendar entry covering start (inclusive) to end (exclusive).

    Peak-season ranges may price nights relative to the base price with a
    fixed or percentage increase instead of an explicit price.
    """

    scope_id: str = Field(..., description="Property or room identifier", examples=["property-42"])
    start: dt.date = Field(..., description="First date of the range", examples=["2025-07-01"])
    end: dt.date = Field(..., description="End of the range (exclusive)", examples=["2025-09-01"])
    type: PriceType = Field(..., description="Status applied to every date", examples=["peak_season"])
    price: Optional[int] = Field(default=None, ge=0, description="Explicit nightly price in cents")
    price_increase: Optional[int] = Field(
        default=None, ge=0, description="Cents added to the base price (peak season only)"
    )
    percentage_increase: Optional[float] = Field(
        default=None,
        ge=0,
        allow_inf_nan=False,
        description="Percent added to the base price (peak season only)",
    )


class OverrideCalendar(Mapping[dt.date, CalendarOverride]):
    """Immutable date -> override mapping for a single scope.

    Built from append-only source entries. Duplicate dates are resolved
    last-write-wins in the order entries are supplied. A room calendar may
    inherit its property's entries; the room's own entries win.
    """

    def __init__(
        self,
        scope_id: str,
        overrides: Optional[Mapping[dt.date, CalendarOverride]] = None,
        parent_scope_id: Optional[str] = None,
    ):
        self.scope_id = scope_id
        self.parent_scope_id = parent_scope_id
        self._overrides: dict[dt.date, CalendarOverride] = dict(overrides or {})

    @classmethod
    def from_entries(
        cls,
        scope_id: str,
        entries: Iterable[CalendarOverride],
        parent_scope_id: Optional[str] = None,
    ) -> "OverrideCalendar":
        """Build a calendar for one scope from raw entries in write order.

        Entries of the parent scope fill dates the scope itself does not
        set. Entries belonging to any other scope are ignored.

        Args:
            scope_id: Property or room identifier to keep
            entries: Source entries, oldest first
            parent_scope_id: Property whose entries a room inherits

        Returns:
            OverrideCalendar with at most one override per date
        """
        own: dict[dt.date, CalendarOverride] = {}
        inherited: dict[dt.date, CalendarOverride] = {}
        for entry in entries:
            # Later writes replace earlier ones for the same date
            if entry.scope_id == scope_id:
                own[entry.date] = entry
            elif parent_scope_id is not None and entry.scope_id == parent_scope_id:
                inherited[entry.date] = entry
        return cls(scope_id, {**inherited, **own}, parent_scope_id)

    def __getitem__(self, key: dt.date) -> CalendarOverride:
        return self._overrides[key]

    def __iter__(self) -> Iterator[dt.date]:
        return iter(sorted(self._overrides))

    def __len__(self) -> int:
        return len(self._overrides)

    def __repr__(self) -> str:
        return (
            f"OverrideCalendar(scope_id={self.scope_id!r}, "
            f"parent_scope_id={self.parent_scope_id!r}, overrides={len(self)})"
        )


class ResolvedNight(BaseModel):
    """Effective status and price for a single date."""

    model_config = ConfigDict(frozen=True)

    date: dt.date = Field(..., description="Calendar date (YYYY-MM-DD)", examples=["2025-06-01"])
    type: PriceType = Field(..., description="Resolved status for the date")
    price: int = Field(..., ge=0, description="Nightly price in cents (kept for sold-out nights)")
    bookable: bool = Field(..., description="False only for sold-out nights")


class MonthCalendar(BaseModel):
    """Every day of a month resolved, with per-status counts."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "month": "2025-06",
                    "days": [
                        {"date": "2025-06-01", "type": "sold_out", "price": 10000, "bookable": False},
                        {"date": "2025-06-02", "type": "best_deal", "price": 8000, "bookable": True},
                    ],
                    "available_count": 28,
                    "sold_out_count": 1,
                    "peak_season_count": 0,
                    "best_deal_count": 1,
                    "currency": "EUR",
                }
            ]
        },
    )

    month: str = Field(..., pattern=r"^\d{4}-\d{2}$", description="Month in YYYY-MM format")
    days: list[ResolvedNight]
    available_count: int = Field(..., ge=0)
    sold_out_count: int = Field(..., ge=0)
    peak_season_count: int = Field(..., ge=0)
    best_deal_count: int = Field(..., ge=0)
    currency: str = "EUR"
