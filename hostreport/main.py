"""One-shot diagnostic report: GPU, host, then weather, printed to stdout."""

import argparse
import asyncio
import logging
import sys
from typing import Optional

from hostreport.config import APP_VERSION, Settings, settings
from hostreport.report.gpu import render_gpu, render_gpu_error
from hostreport.report.system import render_disks, render_system
from hostreport.report.weather import render_city_weather, render_weather_alt
from hostreport.services.errors import FetchError, GpuError
from hostreport.services.gpu_service import GPUService
from hostreport.services.system_service import SystemService
from hostreport.services.weather_service import WeatherService

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="hostreport",
        description="Print GPU, host and weather diagnostics",
    )
    parser.add_argument(
        "--city-id",
        type=int,
        default=None,
        help=f"City id for the forecast endpoint (default: {settings.CITY_ID})",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help=f"Per-request HTTP timeout in seconds (default: {settings.HTTP_TIMEOUT})",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help=f"Log level for stderr diagnostics (default: {settings.LOG_LEVEL})",
    )
    parser.add_argument(
        "--no-fatal-fetch",
        action="store_true",
        help="Report weather fetch failures and keep going instead of exiting",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    return parser.parse_args(argv)


def apply_overrides(base: Settings, args: argparse.Namespace) -> Settings:
    """Settings for this run: environment values with CLI flags on top."""
    update = {}
    if args.city_id is not None:
        update["CITY_ID"] = args.city_id
    if args.timeout is not None:
        update["HTTP_TIMEOUT"] = args.timeout
    if args.log_level:
        update["LOG_LEVEL"] = args.log_level.upper()
    if args.no_fatal_fetch:
        update["FETCH_ERRORS_FATAL"] = False
    return base.model_copy(update=update)


def configure_logging(cfg: Settings):
    level = logging.DEBUG if cfg.DEBUG else getattr(logging, cfg.LOG_LEVEL.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def emit(lines: list[str]):
    for line in lines:
        print(line)


def report_gpu(gpu_service: GPUService):
    """GPU failures are printed and never stop the run."""
    try:
        snapshot = gpu_service.read_snapshot()
    except GpuError as e:
        logger.warning("GPU telemetry unavailable: %s", e)
        emit(render_gpu_error(e))
        return
    emit(render_gpu(snapshot))


def report_host(system_service: SystemService):
    snapshot = system_service.read_snapshot()
    emit(render_system(snapshot))
    emit(render_disks(snapshot.disks))


async def report_weather(weather_service: WeatherService, city_id: int, fatal: bool = True):
    """Run both fetches in order, printing each section as it arrives."""
    try:
        emit(render_weather_alt(await weather_service.fetch_weather_alt()))
    except FetchError as e:
        if fatal:
            raise
        logger.warning("Skipping auxiliary weather: %s", e)
        emit([f"Weather unavailable: {e}"])

    try:
        emit(render_city_weather(await weather_service.fetch_weather_raw(city_id)))
    except FetchError as e:
        if fatal:
            raise
        logger.warning("Skipping city weather: %s", e)
        emit([f"Weather unavailable: {e}"])


def main(
    argv: Optional[list[str]] = None,
    gpu_service: Optional[GPUService] = None,
    system_service: Optional[SystemService] = None,
    weather_service: Optional[WeatherService] = None,
) -> int:
    """Run the full report and return the process exit status."""
    cfg = apply_overrides(settings, parse_args(argv))
    configure_logging(cfg)

    gpu_service = gpu_service or GPUService()
    system_service = system_service or SystemService(cpu_sample_interval=cfg.CPU_SAMPLE_INTERVAL)
    weather_service = weather_service or WeatherService(
        city_weather_url=cfg.CITY_WEATHER_URL,
        aux_weather_url=cfg.AUX_WEATHER_URL,
        timeout=cfg.HTTP_TIMEOUT,
    )

    report_gpu(gpu_service)
    report_host(system_service)

    try:
        asyncio.run(report_weather(weather_service, cfg.CITY_ID, fatal=cfg.FETCH_ERRORS_FATAL))
    except FetchError as e:
        logger.error("Aborting report: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
