#!/usr/bin/env python3
"""
Скрипт для инициализации базы данных Todo App
"""
import argparse
import asyncio
import sys
from pathlib import Path

# Добавляем корневую директорию в путь
sys.path.append(str(Path(__file__).parent.parent))

from todo_app.db.database import init_db, close_db


async def create_tables(drop: bool = False) -> bool:
    """Создание таблиц в БД"""
    print("📊 Создание таблиц базы данных...")

    try:
        await init_db(drop=drop)
        print("✅ Таблицы успешно созданы")
    except Exception as e:
        print(f"❌ Ошибка при создании таблиц: {e}")
        return False
    finally:
        await close_db()

    return True


def main() -> int:
    parser = argparse.ArgumentParser(description="Инициализация базы данных Todo App")
    parser.add_argument(
        "--drop",
        action="store_true",
        help="удалить существующие таблицы перед созданием"
    )
    args = parser.parse_args()

    ok = asyncio.run(create_tables(drop=args.drop))
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
