from ..argument import Argument
from ..context import CommandContext
from ..decorators import command


@command(
    name="help",
    description="Displays a list of available commands, or detailed information for a specified command.",
    aliases=["commands"],
    group_id="util",
    guarded=True,
    arguments=[
        Argument("command_name", label="command", default="", description="Command to describe"),
    ],
)
async def help_command(ctx: CommandContext, command_name: str) -> None:
    registry = ctx.registry

    if command_name:
        target = registry.find_command(command_name)
        if target is None:
            await ctx.reply("That's not a valid command!")
            return

        lines = [f"*Name:* {target.name}"]
        if target.description:
            lines.append(f"*Description:* {target.description}")
        if target.aliases:
            lines.append(f"*Aliases:* {', '.join(target.aliases)}")
        if target.group is not None:
            lines.append(f"*Group:* {target.group.name}")
        lines.append(f"*Usage:* {target.usage()}")
        if target.details:
            lines.append(f"*Details:* {target.details}")
        if target.examples:
            lines.append("*Examples:*\n" + "\n".join(target.examples))
        if not registry.is_enabled(target):
            lines.append("\n_This command is currently disabled_")
        if target.group_only:
            lines.append("\n_This command can only be used in groups_")

        await ctx.reply("\n".join(lines))
        return

    visible = [cmd.name for cmd in registry.commands.values() if not cmd.hidden and not cmd.unknown]
    await ctx.reply(
        "Here's a list of all my commands:\n"
        + ", ".join(visible)
        + f"\n\nYou can send {ctx.command.usage('<command>')} to get info on a specific command."
    )
