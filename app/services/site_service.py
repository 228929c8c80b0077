from app.schemas.site import ContactInfo, SiteConfig, SiteInfo, UserInfo
from app.settings import Settings


def build_site_config(settings: Settings) -> SiteConfig:
    """Branding and contact details for the presentation layer."""
    return SiteConfig(
        user=UserInfo(
            name=settings.USER_NAME,
            title=settings.USER_TITLE,
            description=settings.USER_DESCRIPTION,
        ),
        contact=ContactInfo(
            github=settings.GITHUB_URL,
            linkedin=settings.LINKEDIN_URL,
            twitter=settings.TWITTER_URL or None,
            email=settings.EMAIL or None,
        ),
        site=SiteInfo(
            title=settings.site_title,
            description=settings.site_description,
            chatUrl=settings.CHAT_URL,
        ),
    )
