from decimal import Decimal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # App
    debug: bool = False
    log_level: str = "INFO"

    # STR revenue: nightly rate x (days per month x occupancy)
    days_per_month: Decimal = Decimal("30.44")

    # DSCR lender stress test
    # Stress rate defaults to note rate + spread (percentage points)
    dscr_stress_rate_spread: Decimal = Decimal("2")
    dscr_stress_presets: dict[str, dict[str, Decimal]] = {
        "LTR": {"stress_vacancy": Decimal("5"), "min_dscr": Decimal("1.00")},
        "STR": {"stress_vacancy": Decimal("15"), "min_dscr": Decimal("1.25")},
    }
    # False keeps a hand-tuned stress rate when the note rate is edited
    dscr_reset_stress_on_rate_edit: bool = True

    # Data transfer between calculators: zero values are treated as "nothing to push"
    transfer_skip_zero_values: bool = True

    # Multi-unit: rent for a new unit when there is no previous rent to copy
    default_multi_unit_rent: Decimal = Decimal("1500")


settings = Settings()
