from ..argument import Argument
from ..context import CommandContext
from ..decorators import command


@command(
    name="disable-command",
    description="Disables a command or command group globally.",
    aliases=["disable", "cmd-off", "command-off"],
    group_id="util",
    owner_only=True,
    guarded=True,
    arguments=[Argument("target", label="command/group")],
)
async def disable_command(ctx: CommandContext, target: str) -> None:
    registry = ctx.registry

    found = registry.find_command(target)
    if found is not None:
        if not registry.is_enabled(found):
            await ctx.reply(f"The ```{found.name}``` command is already disabled.")
            return
        if found.guarded:
            await ctx.reply(f"You cannot disable the ```{found.name}``` command.")
            return
        registry.set_command_enabled(found, False)
        await ctx.reply(f"The ```{found.name}``` command has been disabled.")
        return

    group = registry.find_group(target)
    if group is not None:
        if not registry.is_group_enabled(group):
            await ctx.reply(f"The ```{group.name}``` group is already disabled.")
            return
        if group.guarded:
            await ctx.reply(f"You cannot disable the ```{group.name}``` group.")
            return
        registry.set_group_enabled(group, False)
        await ctx.reply(f"The ```{group.name}``` group has been disabled.")
        return

    await ctx.reply("That's not a valid command!")
