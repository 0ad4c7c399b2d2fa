"""Loan scenario configuration and user inputs."""

from dataclasses import dataclass
from decimal import Decimal


class UnknownScenarioError(KeyError):
    """Raised when a scenario id is not one of the preset scenarios."""


@dataclass(frozen=True)
class LoanScenario:
    id: int
    name: str
    term_years: int  # Nominal (contracted) term
    annual_rate: Decimal  # Percent, e.g. 6.8 for 6.8%
    accelerated: bool = False
    target_term_years: Decimal | None = None  # Payoff target when accelerated
    down_payment_override: Decimal | None = None  # Percent; replaces the user's default
    color: str = "#64748b"

    @property
    def effective_term_years(self) -> Decimal:
        if self.accelerated and self.target_term_years is not None:
            return self.target_term_years
        return Decimal(self.term_years)

    @property
    def term_label(self) -> str:
        """Short description, e.g. '50yr @ 6.8% → 30yr'."""
        label = f"{self.term_years}yr @ {self.annual_rate}%"
        if self.accelerated and self.target_term_years is not None:
            label += f" → {self.target_term_years}yr"
        if self.down_payment_override is not None:
            label += f" ({self.down_payment_override}% down)"
        return label


@dataclass(frozen=True)
class LoanInputs:
    """Values the user controls. Immutable so it can key a memo cache."""
    house_price: Decimal
    down_payment_pct: Decimal

    def __post_init__(self):
        if not (self.house_price.is_finite() and self.down_payment_pct.is_finite()):
            raise ValueError("House price and down payment must be finite numbers")
        if self.house_price <= 0:
            raise ValueError("House price must be positive")
        if not Decimal("0") <= self.down_payment_pct <= Decimal("100"):
            raise ValueError("Down payment percent must be between 0 and 100")

    @property
    def down_payment(self) -> Decimal:
        return self.house_price * self.down_payment_pct / 100


PRESET_SCENARIOS: tuple[LoanScenario, ...] = (
    LoanScenario(
        id=1, name="30-Yr Standard", term_years=30, annual_rate=Decimal("6.3"),
        color="#3b82f6",
    ),
    LoanScenario(
        id=2, name="20-Yr Standard", term_years=20, annual_rate=Decimal("6.0"),
        color="#10b981",
    ),
    LoanScenario(
        id=3, name="50-Yr Standard", term_years=50, annual_rate=Decimal("6.8"),
        color="#ef4444",
    ),
    LoanScenario(
        id=4, name="50-Yr (Paid in 30)", term_years=50, annual_rate=Decimal("6.8"),
        accelerated=True, target_term_years=Decimal("30"), color="#f59e0b",
    ),
    LoanScenario(
        id=5, name="30-Yr (Paid in 20)", term_years=30, annual_rate=Decimal("6.3"),
        accelerated=True, target_term_years=Decimal("20"), color="#8b5cf6",
    ),
    # 36.46yr is roughly the payoff time of the 50yr loan when paying the
    # 30yr standard payment (see engine.amortization.payoff_term_years)
    LoanScenario(
        id=6, name="50-Yr Accelerated", term_years=50, annual_rate=Decimal("6.8"),
        accelerated=True, target_term_years=Decimal("36.46"), color="#ec4899",
    ),
    LoanScenario(
        id=7, name="50-Yr (3.5% Down)", term_years=50, annual_rate=Decimal("6.8"),
        down_payment_override=Decimal("3.5"), color="#14b8a6",
    ),
)

_SCENARIOS_BY_ID = {s.id: s for s in PRESET_SCENARIOS}


def get_scenario(scenario_id: int) -> LoanScenario:
    try:
        return _SCENARIOS_BY_ID[scenario_id]
    except KeyError:
        raise UnknownScenarioError(scenario_id) from None
