import asyncio
import logging
import sys

from dotenv import load_dotenv

# 1. Load .env before settings are read
load_dotenv()

from src.core.config import settings  # noqa: E402
from src.core.http import ApiClient  # noqa: E402


async def verify_api() -> bool:
    print("-" * 30)
    print(f"🔍 Checking API at {settings.api_url} (timeout {settings.api_timeout_ms} ms)...")
    if settings.api_token:
        print(f"ℹ️  API_TOKEN set, user type: {settings.api_user_type or '-'}")
    else:
        print("ℹ️  No API_TOKEN: only public endpoints will be reachable")

    async with ApiClient() as api:
        ok = await api.ping()

    if ok:
        print("✅ API reachable")
    else:
        print("❌ API unreachable")
    return ok


async def main() -> int:
    logging.basicConfig(level=settings.log_level)
    print("🚀 Verifying environment configuration...")

    api_ok = await verify_api()

    print("-" * 30)
    if api_ok:
        print("🎉 Configuration looks correct.")
        return 0
    print("⚠️  Connection problem: check NEXT_PUBLIC_API_URL in .env and that the API is running.")
    return 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
