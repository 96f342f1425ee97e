import json
import os

import click
import yaml

from .runtime import log, reset_verbose_logging, set_verbose_logging
from .utils import expand_paths, read_config

OUTPUT_FORMATS = ("text", "json", "yaml")


def _locate_options(func):
    """Options shared by the commands that resolve context roots."""
    decorators = [
        click.option(
            "--exclude",
            "excludes",
            multiple=True,
            help="Path to exclude (repeatable)",
        ),
        click.option(
            "--options",
            "options_file",
            default=None,
            help="Options file used for every root",
        ),
        click.option(
            "--packages",
            "packages_file",
            default=None,
            help="Package manifest used for every root",
        ),
        click.option(
            "-f",
            "--format",
            "output_format",
            type=click.Choice(OUTPUT_FORMATS),
            default=None,
            help="Output format (text/json/yaml)",
        ),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def _resolve(ctx, paths, excludes, options_file, packages_file):
    from . import locate_roots
    from .resources import InvalidPathError

    config = ctx.obj["config"]
    cwd = os.getcwd()
    all_excludes = list(config.get("exclude") or []) + list(excludes)
    options_file = options_file or config.get("options")
    packages_file = packages_file or config.get("packages")
    try:
        return locate_roots(
            expand_paths(paths, cwd),
            expand_paths(all_excludes, cwd),
            options_file=expand_paths([options_file], cwd)[0] if options_file else None,
            packages_file=(
                expand_paths([packages_file], cwd)[0] if packages_file else None
            ),
        )
    except InvalidPathError as exc:
        raise click.ClickException(str(exc)) from exc


def _output_format(ctx, output_format):
    return output_format or ctx.obj["config"].get("format") or "text"


def _dump(data, output_format):
    if output_format == "json":
        return json.dumps(data, indent=2)
    return yaml.safe_dump(data, sort_keys=False).rstrip("\n")


def _format_root_text(root):
    lines = [root.root.path]
    lines.append(f"  options:  {root.options_file.path if root.options_file else '-'}")
    lines.append(f"  packages: {root.packages_file.path if root.packages_file else '-'}")
    for path in root.included_paths:
        lines.append(f"  + {path}")
    for path in root.excluded_paths:
        lines.append(f"  - {path}")
    return "\n".join(lines)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log diagnostics to stderr.")
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(dir_okay=False),
    help="Path to a config.yaml (default: $XDG_CONFIG_HOME/contextroots/config.yaml)",
)
@click.pass_context
def cli(ctx, verbose, config_path):
    """Resolve the analysis context roots of a directory tree."""
    ctx.ensure_object(dict)
    if verbose:
        token = set_verbose_logging(True)
        ctx.call_on_close(lambda: reset_verbose_logging(token))
    try:
        ctx.obj["config"] = read_config(config_path)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc
    except (OSError, yaml.YAMLError) as exc:
        raise click.ClickException(f"Error reading config: {exc}") from exc


@cli.command("locate")
@click.argument("paths", nargs=-1, type=str)
@_locate_options
@click.pass_context
def locate_cmd(ctx, paths, excludes, options_file, packages_file, output_format):
    """Print the context roots for PATHS."""
    if not paths:
        click.echo(ctx.get_help())
        ctx.exit()
    roots = _resolve(ctx, paths, excludes, options_file, packages_file)
    output_format = _output_format(ctx, output_format)
    if output_format == "text":
        click.echo("\n\n".join(_format_root_text(root) for root in roots))
    else:
        click.echo(_dump([root.to_dict() for root in roots], output_format))


@cli.command("files")
@click.argument("paths", nargs=-1, type=str)
@_locate_options
@click.pass_context
def files_cmd(ctx, paths, excludes, options_file, packages_file, output_format):
    """Print the files analyzed in each context root for PATHS."""
    if not paths:
        click.echo(ctx.get_help())
        ctx.exit()
    roots = _resolve(ctx, paths, excludes, options_file, packages_file)
    output_format = _output_format(ctx, output_format)
    if output_format == "text":
        blocks = []
        for root in roots:
            lines = [f"{root.root.path}:"]
            lines.extend(f"  {path}" for path in root.analyzed_files())
            blocks.append("\n".join(lines))
        click.echo("\n\n".join(blocks))
    else:
        data = [
            {"root": root.root.path, "files": list(root.analyzed_files())}
            for root in roots
        ]
        click.echo(_dump(data, output_format))


@cli.command("which")
@click.argument("target", type=str)
@click.option(
    "--include",
    "includes",
    multiple=True,
    help="Path to resolve roots from (default: current directory)",
)
@_locate_options
@click.pass_context
def which_cmd(ctx, target, includes, excludes, options_file, packages_file, output_format):
    """Print the context root that analyzes TARGET."""
    roots = _resolve(ctx, includes or ["."], excludes, options_file, packages_file)
    target_path = expand_paths([target], os.getcwd())[0]
    for root in roots:
        if root.is_analyzed(target_path):
            output_format = _output_format(ctx, output_format)
            if output_format == "text":
                click.echo(_format_root_text(root))
            else:
                click.echo(_dump(root.to_dict(), output_format))
            return
    log(f"No context root analyzes {target_path}")
    click.echo(f"{target_path} is not analyzed by any context root", err=True)
    ctx.exit(1)


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
