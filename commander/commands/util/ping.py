from ..context import CommandContext
from ..decorators import command


@command(
    name="ping",
    description="Checks if the bot is online.",
    aliases=["check"],
    group_id="util",
)
async def ping(ctx: CommandContext) -> None:
    await ctx.reply("pong")
