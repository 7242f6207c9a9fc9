#!/usr/bin/env python3
"""
Member/Team 샘플 데이터 시드 스크립트
- 테이블 생성 (--create-tables)
- teamA/teamB, member1~4 생성

실행:
  python seeds/seed_members.py                    # 샘플 데이터 생성 (이미 있으면 건너뜀)
  python seeds/seed_members.py --create-tables    # 테이블 생성 후 시드
  python seeds/seed_members.py --force            # 기존 데이터가 있어도 추가 생성
"""
import argparse
import asyncio
import logging

from dotenv import load_dotenv

load_dotenv()

from member_search.core.database import async_session_maker, create_tables, engine  # noqa: E402
from member_search.services.sample_data import seed_sample_data  # noqa: E402

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("seed_members")


# ============================================
# CLI 파서
# ============================================
def parse_args() -> argparse.Namespace:
    """명령줄 인자 파싱"""
    parser = argparse.ArgumentParser(description="Member/Team 샘플 데이터 생성")
    parser.add_argument("--create-tables", action="store_true", dest="create_tables",
                        help="시드 전에 테이블 생성")
    parser.add_argument("--force", action="store_true",
                        help="기존 회원이 있어도 샘플 데이터 추가")
    return parser.parse_args()


async def main(args: argparse.Namespace) -> None:
    if args.create_tables:
        await create_tables()
        logger.info("Tables created")

    try:
        async with async_session_maker() as session:
            members = await seed_sample_data(session, skip_if_exists=not args.force)
            await session.commit()
        logger.info("Seeded %d members", len(members))
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main(parse_args()))
