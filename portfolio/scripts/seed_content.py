"""
Seed Content Script
Populates the profile, skills, projects, education, experience and
certifications tables with starter content. Lists are replaced wholesale;
the profile is only created when the admin user has none.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from portfolio.database.bulk import replace_all, with_order_index
from portfolio.database.supabase_client import SupabaseClient
from supabase import Client
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SKILL_CATEGORIES = [
    {"title": "Web Development", "skills": [("Next.js", 85), ("React", 85), ("FastAPI", 75)]},
    {"title": "IT Support", "skills": [("Troubleshooting", 90), ("Networking", 75)]},
    {"title": "Data Analysis", "skills": [("SQL", 80), ("Python", 80), ("Excel", 85)]},
]

ADDITIONAL_SKILLS = ["Git", "Linux", "Docker", "Technical Writing"]

PROJECTS = [
    {
        "title": "Portfolio Website",
        "description": "Personal portfolio with an admin dashboard for managing content.",
        "link": "",
        "github": "",
        "stack": ["Next.js", "FastAPI", "Supabase"],
        "category": "Web Development",
    },
]

EDUCATION = [
    {
        "school": "University Name",
        "degree": "Bachelor of Science in Computer Science",
        "period": "20XX - 20XX",
        "description": "Software engineering, databases, algorithms and data structures.",
    },
]

EXPERIENCE = [
    {
        "title": "Freelance Web Developer",
        "company": "",
        "period": "2022 - Present",
        "description": "Built and maintained web applications for clients.",
    },
]

CERTIFICATIONS = [
    {"title": "IBM Database Certificate", "description": "Database Management and Design"},
    {"title": "Google Technical Support Certificate", "description": "Technical Support Fundamentals"},
]


def seed_skills(supabase: Client):
    logger.info("Seeding skills...")
    supabase.table("skills").delete().gte("id", 0).execute()
    supabase.table("skill_categories").delete().gte("id", 0).execute()
    for index, category in enumerate(SKILL_CATEGORIES):
        inserted = supabase.table("skill_categories")\
            .insert({"title": category["title"], "order_index": index})\
            .execute()
        category_id = inserted.data[0]["id"]
        supabase.table("skills").insert([
            {"name": name, "level": level, "category_id": category_id, "order_index": i}
            for i, (name, level) in enumerate(category["skills"])
        ]).execute()
    replace_all(supabase, "additional_skills", with_order_index([{"name": n} for n in ADDITIONAL_SKILLS]))


def seed_profile(supabase: Client):
    admin = supabase.table("users")\
        .select("id, name")\
        .eq("role", "admin")\
        .limit(1)\
        .execute()
    if not admin.data:
        logger.warning("No admin user found; run create_admin_user first. Skipping profile.")
        return
    user = admin.data[0]
    existing = supabase.table("user_profiles")\
        .select("id")\
        .eq("user_id", user["id"])\
        .execute()
    if existing.data:
        logger.info("Profile already exists, leaving it untouched")
        return
    supabase.table("user_profiles").insert({
        "user_id": user["id"],
        "name": user.get("name"),
        "skills": ["Web Dev", "IT Support", "Data Analysis", "Database Mgmt"],
    }).execute()
    logger.info("Created profile")


def main():
    supabase = SupabaseClient.get_service_client()
    try:
        seed_profile(supabase)
        seed_skills(supabase)
        for table, rows in (
            ("projects", PROJECTS),
            ("education", EDUCATION),
            ("experience", EXPERIENCE),
            ("certifications", CERTIFICATIONS),
        ):
            saved = replace_all(supabase, table, with_order_index(rows))
            logger.info(f"Seeded {len(saved)} rows into {table}")
    except Exception as e:
        logger.error(f"Seeding failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
