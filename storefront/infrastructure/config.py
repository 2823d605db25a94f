"""Application configuration.

Loads settings from environment variables with sensible defaults and
builds the immutable site configuration shared by metadata and content.
"""

from dataclasses import dataclass
from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    api_version: str = "0.1.0"
    debug: bool = False

    # Database
    database_url: str = "postgresql+asyncpg://storefront:storefront_dev_password@db:5432/storefront"
    database_pool_size: int = 5
    database_timeout: float = 5.0

    # Site
    site_name: str = "Burhani Associates"
    site_base_url: str = "https://burhaniassociates.com"
    site_locale: str = "en_IN"
    site_city: str = "Hyderabad"
    site_tagline: str = "Industrial Components Hyderabad"
    site_description: str = (
        "Authorized Dealer for Clamptek, Swiftin, and industrial machinery parts in Hyderabad. "
        "Toggle Clamps, Handwheels, Vibration Mounts, Clamping Elements."
    )
    contact_address: list[str] = [
        "4-4-208 Lala Temple Street, Ranigunj,",
        "Secunderabad - 500003",
    ]
    contact_phones: list[str] = ["040-2780-8786", "+91 80967 76021"]
    contact_email: str = "burhaniassociates23@gmail.com"

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    class Config:
        """Pydantic configuration."""

        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()


@dataclass(frozen=True)
class ContactInfo:
    """Dealer contact card."""

    address: tuple[str, ...]
    phones: tuple[str, ...]
    email: str


@dataclass(frozen=True)
class SiteConfig:
    """Site-wide constants used to build links and page metadata.

    Attributes:
        name: Site (dealer) name appended to page titles.
        base_url: Origin used for canonical and social preview URLs.
        locale: Open Graph locale.
        city: City referenced in fallback descriptions.
        tagline: Suffix of the default home title.
        description: Default site description.
        keywords: Site-wide keyword list.
        product_keywords: Fixed keywords appended to every product page.
        contact: Contact card.
    """

    name: str
    base_url: str
    locale: str
    city: str
    tagline: str
    description: str
    keywords: tuple[str, ...]
    product_keywords: tuple[str, ...]
    contact: ContactInfo

    @classmethod
    def from_settings(cls, settings: Settings) -> "SiteConfig":
        """Build site configuration from loaded settings."""
        return cls(
            name=settings.site_name,
            base_url=settings.site_base_url.rstrip("/"),
            locale=settings.site_locale,
            city=settings.site_city,
            tagline=settings.site_tagline,
            description=settings.site_description,
            keywords=(
                "Industrial Components",
                "Toggle Clamps",
                "Handwheels",
                "Vibration Mounts",
                "Clamptek",
                "Swiftin",
                settings.site_city,
                "Secunderabad",
                "Ranigunj",
                "Industrial Machinery Parts",
                settings.site_name,
            ),
            product_keywords=("Industrial Components", settings.site_city),
            contact=ContactInfo(
                address=tuple(settings.contact_address),
                phones=tuple(settings.contact_phones),
                email=settings.contact_email,
            ),
        )

    def url(self, path: str) -> str:
        """Build an absolute URL on the site origin."""
        return f"{self.base_url}/{path.lstrip('/')}"


@lru_cache
def get_site_config() -> SiteConfig:
    """Get the process-wide site configuration."""
    return SiteConfig.from_settings(settings)
