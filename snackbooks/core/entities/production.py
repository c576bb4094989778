"""Raw materials, production constants and batch usage entities."""

from datetime import UTC, date, datetime

from pydantic import BaseModel, ConfigDict, Field


class ProductionConfig(BaseModel):
    """Yield ratios and batch constants used by the production calculator."""

    model_config = ConfigDict(frozen=True)

    yield_ratio: float = Field(default=1.4, gt=0)  # 1 kg flour -> 1.4 kg product
    oil_ratio: float = Field(default=0.1, ge=0)  # litres per kg product
    salt_ratio: float = Field(default=0.02, ge=0)
    spice_ratio: float = Field(default=0.01, ge=0)
    batch_unit_kg: float = Field(default=5.0, gt=0)
    minutes_per_batch: float = Field(default=30.0, ge=0)
    gas_cost_per_minute: float = Field(default=2.0, ge=0)


DEFAULT_PRODUCTION_CONFIG = ProductionConfig()


class MaterialRequirements(BaseModel):
    """Raw-material quantities needed for a given product weight."""

    flour_kg: float = 0.0
    oil_l: float = 0.0
    salt_kg: float = 0.0
    spice_kg: float = 0.0
    gas_minutes: float = 0.0

    def material_quantities(self) -> dict[str, float]:
        """Quantities keyed by the material name they are bought under."""
        return {
            "maida": self.flour_kg,
            "oil": self.oil_l,
            "salt": self.salt_kg,
            "ajwain": self.spice_kg,
        }


class Material(BaseModel):
    """A purchasable raw material."""

    id: int | None = None
    name: str
    unit: str = "kg"
    price_per_unit: float = 0.0
    stock: float = 0.0

    @property
    def stock_value(self) -> float:
        return self.stock * self.price_per_unit


DEFAULT_MATERIALS: tuple[Material, ...] = (
    Material(name="Maida", unit="kg", price_per_unit=45.0),
    Material(name="Oil", unit="litre", price_per_unit=120.0),
    Material(name="Salt", unit="kg", price_per_unit=5.0),
    Material(name="Ajwain", unit="kg", price_per_unit=7.0),
    Material(name="Gas", unit="per kg production", price_per_unit=25.0),
)


class MaterialUsage(BaseModel):
    """A recorded production batch. Append-only."""

    id: int | None = None
    usage_date: date = Field(default_factory=date.today)
    batch_size_kg: float
    requirements: MaterialRequirements
    total_cost: float = 0.0
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
