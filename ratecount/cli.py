#!filepath: ratecount/cli.py
import sys
import time
from typing import List, Optional

import typer
from rich import print

from ratecount import __version__, logs
from ratecount.config.app_config import AppConfig
from ratecount.config.counter_config import CounterConfig, Direction
from ratecount.observability.counter import Counter
from ratecount.observability.sinks import build_sinks
from ratecount.utils.errors import UserInputError

app = typer.Typer(help="ratecount: progress / throughput counter")


def _setup(config: Optional[str], quiet: bool) -> AppConfig:
    cfg = AppConfig.load(path=config)
    if quiet:
        cfg.display.quiet = True
    logs.reconfigure(
        log_dir=cfg.log.dir,
        rotation=cfg.log.rotation,
        retention=cfg.log.retention,
        log_level=cfg.log.level,
    )
    return cfg


def _build_counter(cfg: AppConfig, counter_cfg: CounterConfig) -> Counter:
    line_sink, title_sink = build_sinks(cfg.display)
    return Counter(
        counter_cfg,
        line_sink=line_sink,
        title_sink=title_sink,
        float_precision=cfg.display.float_precision,
    )


def _fail(e: UserInputError):
    logs.error(str(e))
    print(f"[red]{e}[/red]")
    raise typer.Exit(code=2)


@app.command()
def version():
    print(__version__)


@app.command()
def lines(
    display: str = typer.Option("lines", "--display", "-d", help="状态行标签"),
    expect: int = typer.Option(0, "--expect", "-e", help="预期总行数，0 = 未知"),
    mod: int = typer.Option(0, "--mod", help="每 N 行输出一次"),
    wait: float = typer.Option(5.0, "--wait", help="两次输出之间最少秒数"),
    average: int = typer.Option(5, "--average", help="速率平均窗口"),
    persec: bool = typer.Option(False, "--persec", help="显示速率"),
    down: bool = typer.Option(False, "--down", help="从 expect 倒数到 0"),
    hms: bool = typer.Option(True, "--hms/--no-hms"),
    date: bool = typer.Option(False, "--date/--no-date"),
    tee: bool = typer.Option(True, "--tee/--no-tee", help="行原样写回 stdout"),
    quiet: bool = typer.Option(False, "--quiet", "-q"),
    config: Optional[str] = typer.Option(None, "--config", help="YAML 配置文件"),
):
    """
    统计 stdin 行数（类似 pv -l），EOF 时输出最终状态行
    """
    cfg = _setup(config, quiet)
    try:
        counter_cfg = CounterConfig(
            label=display,
            expected=expect,
            direction=Direction.BACKWARD if down else Direction.FORWARD,
            emit_every_n=mod,
            min_interval_seconds=wait,
            show_rate_per_second=persec,
            show_duration=hms,
            show_absolute_date=date,
            show_title=cfg.display.show_title,
            average_window=average,
        )
    except ValueError as e:
        _fail(UserInputError(str(e)))

    counter = _build_counter(cfg, counter_cfg)
    for line in sys.stdin:
        if tee:
            sys.stdout.write(line)
        counter.advance()
    counter.finish()


@app.command()
def demo(
    directives: Optional[List[str]] = typer.Argument(None, help="计数器指令，如 display=scan expect 100 mod=10"),
    ticks: int = typer.Option(100, "--ticks", "-n"),
    sleep: float = typer.Option(0.0, "--sleep", help="每次 tick 之间 sleep 秒数"),
    quiet: bool = typer.Option(False, "--quiet", "-q"),
    config: Optional[str] = typer.Option(None, "--config"),
):
    """
    用指令构造 counter 并 tick 若干次
    """
    cfg = _setup(config, quiet)
    try:
        counter_cfg = CounterConfig.from_directives(*(directives or []))
    except UserInputError as e:
        _fail(e)

    counter = _build_counter(cfg, counter_cfg)
    counter.dump()
    for _ in range(ticks):
        counter.advance()
        if sleep:
            time.sleep(sleep)
    counter.finish()


if __name__ == "__main__":
    app()

# python -m ratecount.cli demo display=scan expect 100 mod=10
