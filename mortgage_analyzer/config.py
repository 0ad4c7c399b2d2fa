from decimal import Decimal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Starting inputs
    default_house_price: Decimal = Decimal("200000")
    default_down_payment_pct: Decimal = Decimal("5")
    default_active_scenarios: list[int] = [1, 2, 3]

    # Slider bounds
    house_price_min: int = 50000
    house_price_max: int = 1000000
    house_price_step: int = 10000
    down_payment_min: float = 0
    down_payment_max: float = 20
    down_payment_step: float = 0.5

    # Display
    schedule_display_years: int = 11  # Years 0-10
    timeline_step_years: int = 2

    # App
    debug: bool = False
    log_level: str = "INFO"
    dashboard_port: int = 8050


settings = Settings()
