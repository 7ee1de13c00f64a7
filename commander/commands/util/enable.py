from ..argument import Argument
from ..context import CommandContext
from ..decorators import command


@command(
    name="enable-command",
    description="Enables a command or command group globally.",
    aliases=["enable", "cmd-on", "command-on"],
    group_id="util",
    hidden=True,
    owner_only=True,
    guarded=True,
    arguments=[Argument("target", label="command/group")],
)
async def enable_command(ctx: CommandContext, target: str) -> None:
    registry = ctx.registry

    found = registry.find_command(target)
    if found is not None:
        if registry.is_enabled(found):
            await ctx.reply(f"The ```{found.name}``` command is already enabled.")
            return
        registry.set_command_enabled(found, True)
        if found.group is not None and not registry.is_group_enabled(found.group):
            await ctx.reply(
                f"The ```{found.name}``` command has been enabled, but its ```{found.group.name}``` group is disabled."
            )
            return
        await ctx.reply(f"The ```{found.name}``` command has been enabled.")
        return

    group = registry.find_group(target)
    if group is not None:
        if registry.is_group_enabled(group):
            await ctx.reply(f"The ```{group.name}``` group is already enabled.")
            return
        registry.set_group_enabled(group, True)
        await ctx.reply(f"The ```{group.name}``` group has been enabled.")
        return

    await ctx.reply("That's not a valid command!")
