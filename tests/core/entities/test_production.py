"""Unit tests for production entities."""

import pytest
from pydantic import ValidationError

from snackbooks.core.entities import (
    DEFAULT_MATERIALS,
    DEFAULT_PRODUCTION_CONFIG,
    Material,
    MaterialRequirements,
    ProductionConfig,
)


class TestProductionConfig:
    def test_defaults(self):
        config = DEFAULT_PRODUCTION_CONFIG
        assert config.yield_ratio == 1.4
        assert config.oil_ratio == 0.1
        assert config.salt_ratio == 0.02
        assert config.spice_ratio == 0.01
        assert config.batch_unit_kg == 5.0
        assert config.minutes_per_batch == 30.0
        assert config.gas_cost_per_minute == 2.0

    def test_yield_ratio_must_be_positive(self):
        with pytest.raises(ValidationError):
            ProductionConfig(yield_ratio=0)

    def test_config_is_frozen(self):
        with pytest.raises(ValidationError):
            DEFAULT_PRODUCTION_CONFIG.oil_ratio = 0.5


class TestMaterial:
    def test_stock_value(self):
        material = Material(name="Oil", unit="litre", price_per_unit=120.0, stock=2.5)
        assert material.stock_value == 300.0

    def test_default_materials(self):
        by_name = {m.name: m for m in DEFAULT_MATERIALS}
        assert list(by_name) == ["Maida", "Oil", "Salt", "Ajwain", "Gas"]
        assert by_name["Maida"].price_per_unit == 45.0
        assert by_name["Oil"].unit == "litre"
        assert by_name["Gas"].unit == "per kg production"
        assert all(m.stock == 0 for m in DEFAULT_MATERIALS)


class TestMaterialRequirements:
    def test_material_quantities_use_purchase_names(self):
        req = MaterialRequirements(flour_kg=1.0, oil_l=0.5, salt_kg=0.1, spice_kg=0.05)
        assert req.material_quantities() == {
            "maida": 1.0,
            "oil": 0.5,
            "salt": 0.1,
            "ajwain": 0.05,
        }
