import logging

from click import group, option, pass_context

from chartmarks.scripts.compile import compile


@group()
@option("--debug", is_flag=True, default=False, help="Enable debug logging")
@pass_context
def cli(ctx, debug: bool):
    """chartmarks - compile chart encodings into renderer marks."""
    ctx.ensure_object(dict)
    ctx.obj["DEBUG"] = debug

    if debug:
        logging.basicConfig(level=logging.DEBUG)


cli.command("compile")(compile)


if __name__ == "__main__":
    cli()
