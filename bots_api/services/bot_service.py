# bots_api/services/bot_service.py

from typing import Any, Dict, List

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from bots_api.core.exceptions import BotNotFoundError
from bots_api.models.bot import Bot

class BotService:
    """Persistence commands for the bots table. Each write commits on its own."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_bots(self) -> List[Bot]:
        """All bots, newest id first."""
        result = await self.db.execute(select(Bot).order_by(Bot.id.desc()))
        return list(result.scalars().all())

    async def get_bot(self, bot_id: int) -> Bot:
        bot = await self.db.get(Bot, bot_id)
        if bot is None:
            raise BotNotFoundError(bot_id)
        return bot

    async def create_bot(self, columns: Dict[str, Any]) -> Bot:
        db_bot = Bot(**columns)
        self.db.add(db_bot)
        await self.db.commit()
        await self.db.refresh(db_bot) # Loads the generated id, defaults and timestamps
        logger.info(f"Created bot '{db_bot.name}' with ID: {db_bot.id}")
        return db_bot

    async def update_bot(self, bot_id: int, columns: Dict[str, Any]) -> Bot:
        """Applies ``columns`` to the stored bot and returns the refreshed row."""
        db_bot = await self.get_bot(bot_id)
        for key, value in columns.items():
            setattr(db_bot, key, value)
        await self.db.commit()
        await self.db.refresh(db_bot)
        logger.info(f"Updated bot {bot_id} ({', '.join(columns) or 'no fields'})")
        return db_bot

    async def toggle_availability(self, bot_id: int) -> Bot:
        db_bot = await self.get_bot(bot_id)
        return await self.update_bot(bot_id, {"availability": not db_bot.availability})

    async def delete_bot(self, bot_id: int) -> None:
        db_bot = await self.get_bot(bot_id)
        await self.db.delete(db_bot)
        await self.db.commit()
        logger.info(f"Deleted bot {bot_id}")
