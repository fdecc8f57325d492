import os
from dataclasses import dataclass
from typing import List

from dotenv import load_dotenv

from ..services.global_data import SiteVariant


load_dotenv()


@dataclass(frozen=True)
class Config:
    """Service configuration loaded from environment variables.

    Blog display strings are not held here; they are re-read from the
    environment on every request.
    """

    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "production")
    BLOG_VARIANT: str = os.getenv("BLOG_VARIANT", SiteVariant.CODE_AND_COFFEE.value)
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING")
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: str = os.getenv("PORT", "8080")

    CORS_ALLOWED_ORIGINS_ENV: str = os.getenv("CORS_ALLOWED_ORIGINS", "http://localhost:3000")

    @classmethod
    def allowed_origins(cls, extra_origins: List[str] | None = None) -> List[str]:
        merged = [o.strip() for o in cls.CORS_ALLOWED_ORIGINS_ENV.split(",") if o.strip()]
        if extra_origins:
            merged.extend(extra_origins)
        # Deduplicate while preserving order
        seen = set()
        result: List[str] = []
        for origin in merged:
            if origin not in seen:
                seen.add(origin)
                result.append(origin)
        return result

    @classmethod
    def site_variant(cls) -> SiteVariant:
        try:
            return SiteVariant(cls.BLOG_VARIANT)
        except ValueError:
            known = ", ".join(v.value for v in SiteVariant)
            raise ValueError(f"Unknown BLOG_VARIANT {cls.BLOG_VARIANT!r}. Known: {known}")

    @classmethod
    def port(cls) -> int:
        try:
            return int(cls.PORT)
        except ValueError:
            raise ValueError(f"PORT must be an integer, got {cls.PORT!r}")

    @classmethod
    def validate(cls) -> None:
        cls.site_variant()
        cls.port()
