#!/usr/bin/env python3
"""Helper script to check and create the .env file for the estimator."""

from pathlib import Path
import os
import sys

TEMPLATE = """# Geocoding service (Nominatim-compatible)
CANSHIP_GEOCODER_BASE_URL=https://nominatim.openstreetmap.org
# Nominatim requires an identifying User-Agent; include a contact address
CANSHIP_GEOCODER_USER_AGENT=canship-estimator/0.1 (you@example.com)
CANSHIP_GEOCODER_TIMEOUT_SECONDS=10

# API Configuration
CANSHIP_API_PREFIX=/api
CANSHIP_LOG_LEVEL=INFO
# CANSHIP_FRONTEND_ALLOWED_ORIGINS - JSON array or comma-separated list
# CANSHIP_FRONTEND_ALLOWED_ORIGINS=http://localhost:5173,http://127.0.0.1:5173

# Input handling and route pricing
CANSHIP_DEBOUNCE_SECONDS=0.3
CANSHIP_ROUTE_LEG_WEIGHT=50
CANSHIP_ROUTE_LEG_TIER=standard
"""


def main():
    project_root = Path(__file__).parent
    env_file = project_root / ".env"

    print("=" * 60)
    print("Estimator Environment Variables Checker")
    print("=" * 60)
    print()

    if env_file.exists():
        print(f"✅ Found .env file at: {env_file}")
        print()
        print("Current contents:")
        print("-" * 60)
        with open(env_file, "r", encoding="utf-8") as f:
            print(f.read())
        print("-" * 60)
        print()
    else:
        print(f"❌ .env file NOT found at: {env_file}")
        print("Creating template .env file...")
        with open(env_file, "w", encoding="utf-8") as f:
            f.write(TEMPLATE)
        print(f"✅ Created .env file at: {env_file}")
        print()
        print("⚠️  Please set CANSHIP_GEOCODER_USER_AGENT to something that identifies you!")
        print()
        return

    user_agent = os.getenv("CANSHIP_GEOCODER_USER_AGENT")
    if user_agent:
        print(f"✅ CANSHIP_GEOCODER_USER_AGENT (from environment): {user_agent}")
    else:
        print("ℹ️  CANSHIP_GEOCODER_USER_AGENT not set in environment (the .env file is read at startup)")
    print()

    print("Testing config loading...")
    print()
    try:
        sys.path.insert(0, str(project_root / "src"))
        from canship.config import settings

        print(f"✅ Geocoder: {settings.geocoder_base_url}")
        print(f"✅ User-Agent: {settings.geocoder_user_agent}")
        print(f"✅ Debounce: {settings.debounce_seconds}s, min query length {settings.min_query_length}")
        print(f"✅ Route legs priced as {settings.route_leg_tier} at weight {settings.route_leg_weight}")
        if "example.com" in settings.geocoder_user_agent:
            print()
            print("⚠️  The User-Agent still contains the template contact address.")
    except Exception as e:
        print(f"❌ Error loading config: {e}")
        print()
        print("Make sure you're running this from the project root directory")


if __name__ == "__main__":
    main()
