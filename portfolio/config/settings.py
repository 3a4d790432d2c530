from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, List


class Settings(BaseSettings):
    # Supabase
    supabase_url: str = ""
    supabase_key: str = ""
    supabase_service_role_key: Optional[str] = None  # Required for admin auth operations (password resets, email changes)

    # Storage
    storage_bucket: str = "Images"
    storage_list_limit: int = 100
    gallery_list_limit: int = 1000
    max_image_size_mb: int = 5
    max_document_size_mb: int = 10
    cv_candidate_paths: str = (
        "documents/career/CV.pdf,documents/career/Resume.pdf,"
        "documents/career/cv.pdf,documents/career/resume.pdf,"
        "documents/CV.pdf,documents/Resume.pdf,documents/cv.pdf,documents/resume.pdf,"
        "rootdocs/career/CV.pdf,rootdocs/career/Resume.pdf,"
        "rootdocs/career/cv.pdf,rootdocs/career/resume.pdf,"
        "rootdocs/CV.pdf,rootdocs/Resume.pdf,rootdocs/cv.pdf,rootdocs/resume.pdf"
    )

    # Site content
    site_url: str = "http://localhost:3000"
    contact_whatsapp_number: str = "254700000000"
    default_profile_name: str = "Your Name"
    default_profile_title: str = "Web Developer & IT Specialist"
    default_profile_about: str = "Welcome to my portfolio."
    default_profile_location: str = ""
    default_profile_phone: str = ""
    default_profile_career_focus: str = "Web Development • IT Support • Data Analysis"
    default_profile_image: str = "/me.jpg"
    default_public_image: str = "/me.png"
    default_skills: str = "Web Dev,IT Support,Data Analysis,Database Mgmt"

    # App
    app_name: str = "portfolio-backend"
    debug: bool = False
    environment: str = "development"  # development | staging | production
    log_level: str = "INFO"
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_origins: str = "http://localhost:3000,http://127.0.0.1:3000"
    rate_limit: str = "100/minute"  # slowapi format, e.g. "100/minute"
    auth_rate_limit: str = "5/15minutes"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def storage_public_prefix(self) -> str:
        return f"{self.supabase_url.rstrip('/')}/storage/v1/object/public/{self.storage_bucket}/"

    def get_cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    def get_default_skills(self) -> List[str]:
        return [s.strip() for s in self.default_skills.split(",") if s.strip()]

    def get_cv_candidate_paths(self) -> List[str]:
        return [p.strip() for p in self.cv_candidate_paths.split(",") if p.strip()]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",
        extra="ignore"
    )


settings = Settings()
