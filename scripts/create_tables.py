# flake8: noqa
# scripts/create_tables.py

import asyncio
import typer
from sqlmodel import SQLModel

from labsvc.core.config import settings
from labsvc.core.database import create_db_and_tables, engine

cli = typer.Typer()


async def run_setup(drop: bool) -> None:
    if drop:
        async with engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.drop_all)
        print("기존 테이블을 삭제했습니다.")
    try:
        await create_db_and_tables(engine)
    finally:
        await engine.dispose()


@cli.command()
def main(
    drop: bool = typer.Option(
        False, '--drop',
        help="테이블을 생성하기 전에 기존 lims/inv/ord 테이블을 모두 삭제합니다."
    ),
    yes: bool = typer.Option(
        False, '--yes', '-y',
        help="--drop 사용 시 확인 질문을 건너뜁니다."
    ),
):
    """
    Lab Services 데이터베이스의 스키마(lims, inv, ord)와 테이블을 생성합니다.
    """
    if drop and not yes:
        typer.confirm(f"{settings.APP_ENV} 환경의 모든 테이블을 삭제합니다. 계속할까요?", abort=True)

    print("스키마/테이블 생성을 시작합니다...")
    asyncio.run(run_setup(drop))
    print("완료되었습니다.")


if __name__ == "__main__":
    cli()
