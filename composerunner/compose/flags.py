"""Build ordered docker-compose subcommand arguments from options models.

Every function here is pure: same options in, same list of strings out.
Map-valued options go through :func:`join_flags`, which emits one flag per
entry whatever the value, so ``{"web": 0}`` still becomes ``--scale web=0``.
Scalar numeric options (``timeout``) are emitted only when truthy.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from composerunner.compose.schema import DownOptions, RmOptions, RunOptions, UpOptions


def join_flags(flag: str, mapping: Mapping[str, object], separator: str) -> list[str]:
    """Render ``{k: v, ...}`` as ``[flag, "k<sep>v", flag, ...]`` in insertion order."""
    args: list[str] = []
    for key, value in mapping.items():
        args.extend([flag, f"{key}{separator}{value}"])
    return args


def _bool_flags(pairs: Iterable[tuple[bool, str]]) -> list[str]:
    return [flag for enabled, flag in pairs if enabled]


def _value_flag(flag: str, value: object | None) -> list[str]:
    return [flag, str(value)] if value else []


def _inline_flags(flag: str, values: Sequence[str]) -> list[str]:
    return [f"{flag}={value}" for value in values]


def up_arguments(options: UpOptions | None = None) -> list[str]:
    o = options or UpOptions()
    return [
        "up",
        *_bool_flags(
            [
                (o.detach, "--detach"),
                (o.build, "--build"),
                (o.force_recreate, "--force-recreate"),
                (o.no_recreate, "--no-recreate"),
            ]
        ),
        *_value_flag("--pull", o.pull),
        *join_flags("--scale", o.scale, "="),
        *_value_flag("--timeout", o.timeout),
        *_bool_flags(
            [
                (o.wait, "--wait"),
                (o.abort_on_container_exit, "--abort-on-container-exit"),
            ]
        ),
        *_value_flag("--exit-code-from", o.exit_code_from),
        *_inline_flags("--attach", o.attach),
        *_inline_flags("--no-attach", o.no_attach),
        *_bool_flags(
            [
                (o.remove_orphans, "--remove-orphans"),
                (o.renew_anon_volumes, "--renew-anon-volumes"),
                (o.quiet_pull, "--quiet-pull"),
                (o.timestamps, "--timestamps"),
                (o.no_log_prefix, "--no-log-prefix"),
            ]
        ),
    ]


def run_arguments(
    service: str,
    command: str | None = None,
    args: Sequence[str] = (),
    options: RunOptions | None = None,
) -> list[str]:
    o = options or RunOptions()
    return [
        "run",
        *_bool_flags([(o.build, "--build"), (o.detach, "--detach")]),
        *_value_flag("--entrypoint", o.entrypoint),
        *join_flags("--env", o.env, "="),
        *_bool_flags([(o.interactive, "--interactive")]),
        *join_flags("--label", o.label, "="),
        *_value_flag("--name", o.name),
        *_bool_flags([(o.no_tty, "--no-TTY"), (o.no_deps, "--no-deps")]),
        *join_flags("--publish", o.publish, ":"),
        *_bool_flags(
            [
                (o.quiet_pull, "--quiet-pull"),
                (o.remove_orphans, "--remove-orphans"),
                (o.rm, "--rm"),
                (o.service_ports, "--service-ports"),
                (o.use_aliases, "--use-aliases"),
            ]
        ),
        *_value_flag("--user", o.user),
        *join_flags("--volume", o.volume, ":"),
        *_value_flag("--workdir", o.workdir),
        service,
        *([command] if command else []),
        *args,
    ]


def rm_arguments(options: RmOptions | None = None) -> list[str]:
    o = options or RmOptions()
    return [
        "rm",
        *_bool_flags([(o.stop, "--stop"), (o.force, "--force"), (o.volumes, "--volumes")]),
    ]


def _down_volumes(volumes: str | bool | None) -> list[str]:
    if volumes is True:
        return ["--volumes"]
    # Inline form, so the value is never read as a SERVICE positional.
    return [f"--volumes={volumes}"] if volumes else []


def down_arguments(options: DownOptions | None = None) -> list[str]:
    o = options or DownOptions()
    return [
        "down",
        *_bool_flags([(o.remove_orphans, "--remove-orphans")]),
        *_value_flag("--rmi", o.rmi),
        *_value_flag("--timeout", o.timeout),
        *_down_volumes(o.volumes),
    ]
