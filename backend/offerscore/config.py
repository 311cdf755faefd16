from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Scoring
    scoring_engine: str = "rule-based-v1"
    scoring_candidate_limit: int = 50  # offers fetched per ranking batch
    recommendation_top_n: int = 20

    # Offer listing
    offers_default_page_size: int = 20
    offers_max_page_size: int = 100

    # Demo data
    seed_demo_offers: bool = True
    seed_random_seed: int = 42

    # CORS
    cors_origins: str = "http://localhost:5173"

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",")]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
