"""Simple entrypoint to try the Smart Closet stylist locally."""

import asyncio
import sys

from closet_app.app import SmartClosetApp


async def _run(language: str) -> None:
    app = SmartClosetApp()
    result, items = await app.daily_recommendation(language)
    print(result.text)
    for item in items:
        print(f"- {item.color} {item.description} ({item.category.value})")


def main() -> None:
    language = sys.argv[1] if len(sys.argv) > 1 else "en"
    asyncio.run(_run(language))


if __name__ == "__main__":
    main()
