import logging
import os
import sys
from pathlib import Path

import discord
from discord import app_commands
from discord.ext import commands
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent
if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))

logging.basicConfig(
    level=os.getenv("RINGBOT_LOG_LEVEL", "INFO"),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("ringbot")
logging.getLogger("PIL").setLevel(logging.ERROR)

from ringbot.commands import (  # noqa: E402
    AVATAR_OPTION_DESCRIPTION,
    RING_COMMAND_DESCRIPTION,
    RING_COMMAND_NAME,
    handle_ring_interaction,
)
from ringbot.utils import parse_snowflake, require_env  # noqa: E402

DISCORD_TOKEN = os.getenv("DISCORD_TOKEN")
if not DISCORD_TOKEN:
    raise RuntimeError("Missing DISCORD_TOKEN. Set it in your environment or .env file.")

GUILD_ID = parse_snowflake("GUILD_ID", require_env("GUILD_ID"))


class RingBot(commands.Bot):
    async def setup_hook(self) -> None:
        guild = discord.Object(id=GUILD_ID)
        self.tree.copy_global_to(guild=guild)
        try:
            synced = await self.tree.sync(guild=guild)
            logger.info(
                "Synced guild slash commands for %s: %s",
                GUILD_ID,
                ", ".join(command.name for command in synced),
            )
        except discord.HTTPException as exc:
            logger.warning("Failed to sync application commands for guild %s: %s", GUILD_ID, exc)


bot = RingBot(command_prefix=commands.when_mentioned, intents=discord.Intents.none())


@bot.event
async def on_ready():
    logger.info("Logged in as %s (id=%s)", bot.user, bot.user.id if bot.user else "unknown")


@bot.tree.command(name=RING_COMMAND_NAME, description=RING_COMMAND_DESCRIPTION)
@app_commands.describe(avatar=AVATAR_OPTION_DESCRIPTION)
@app_commands.guild_only()
async def slash_ring_command(interaction: discord.Interaction, avatar: discord.Attachment) -> None:
    await handle_ring_interaction(interaction, avatar)


def main():
    bot.run(DISCORD_TOKEN, log_handler=None)


if __name__ == "__main__":
    main()
