'''recentscan CLI 진입점(KR). recentscan CLI entrypoint (EN).'''

from __future__ import annotations

import json
import logging
import queue
from datetime import datetime
from pathlib import Path
from typing import Any, Tuple

import click

from core import ScanSettings, SettingsError, configure_logging, local_now
from recentscan.scanner import OsDirectoryLister, ScanBatch, ScanController
from recentscan.utils.export_writer import export_records, format_record

DEFAULT_LOG = Path('.cache/recentscan.log')
EXIT_ABORTED = 130

logger = logging.getLogger(__name__)

Event = Tuple[str, Any]


@click.group()
@click.option(
    '--config-file',
    type=click.Path(path_type=Path),
    default=None,
    help='구성 파일 경로 · Config file path',
)
@click.option('--verbose', is_flag=True, help='상세 로그 · Verbose logs')
@click.option('--quiet', is_flag=True, help='간략 로그 · Quiet logs')
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=DEFAULT_LOG,
    help='로그 파일 경로 · Log file path',
)
@click.pass_context
def cli(
    ctx: click.Context, config_file: Path | None, verbose: bool, quiet: bool, log_file: Path
) -> None:
    '''최근 수정 파일 스캐너 CLI · Recently modified file scanner CLI.'''

    level = 'INFO'
    if verbose:
        level = 'DEBUG'
    if quiet:
        level = 'WARNING'
    configure_logging(log_file, level=level)
    try:
        settings = ScanSettings.from_file(config_file) if config_file else ScanSettings()
    except SettingsError as exc:
        raise click.ClickException(str(exc)) from exc
    ctx.obj = {'settings': settings, 'log_file': log_file}


@cli.command('show-config')
@click.pass_context
def show_config(ctx: click.Context) -> None:
    '''적용 설정을 출력한다 · Print effective settings.'''

    settings: ScanSettings = ctx.obj['settings']
    click.echo(json.dumps(settings.to_dict(), ensure_ascii=False, default=str))


def _wait_for_outcome(
    events: queue.Queue[Event], controller: ScanController
) -> Tuple[str, Any, int]:
    '''메인 스레드에서 이벤트를 처리 · Handle scan events on the main thread.'''

    batches = 0
    while True:
        try:
            try:
                kind, payload = events.get(timeout=0.25)
            except queue.Empty:
                continue
            if kind != 'batch':
                return kind, payload, batches
            batch: ScanBatch = payload
            batches += 1
            for record in batch.records:
                click.echo(format_record(record))
        except KeyboardInterrupt:
            logger.info('interrupt received, stopping scan')
            controller.stop()


@cli.command()
@click.argument('root', required=False, type=click.Path(path_type=Path, file_okay=False))
@click.option('--pattern', type=str, default=None, help='파일명 패턴 · File name pattern')
@click.option(
    '--skip-system/--include-system',
    default=None,
    help='시스템 폴더 제외 · Skip the system folder under root',
)
@click.option(
    '--date-from', type=click.DateTime(), default=None, help='시작 일시 · Modified on or after'
)
@click.option(
    '--date-to', type=click.DateTime(), default=None, help='종료 일시 · Modified on or before'
)
@click.option(
    '--days',
    type=click.IntRange(min=0),
    default=None,
    help='최근 일수 · Lookback days when --date-from is absent',
)
@click.option(
    '--export',
    'export_path',
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help='내보내기 경로 · Export TSV path',
)
@click.pass_context
def scan(
    ctx: click.Context,
    root: Path | None,
    pattern: str | None,
    skip_system: bool | None,
    date_from: datetime | None,
    date_to: datetime | None,
    days: int | None,
    export_path: Path | None,
) -> None:
    '''최근 수정 파일을 스캔한다 · Scan for recently modified files.'''

    settings: ScanSettings = ctx.obj['settings']
    request = settings.build_request(
        root=root,
        pattern=pattern,
        skip_system_folder=skip_system,
        date_from=date_from,
        date_to=date_to,
        lookback_days=days,
    )
    controller = ScanController(
        lister=OsDirectoryLister(follow_symlinks=settings.follow_symlinks),
        flush_interval=settings.flush_interval,
        system_folder_name=settings.system_folder_name,
    )
    events: queue.Queue[Event] = queue.Queue()
    controller.start(
        request,
        on_batch=lambda batch: events.put(('batch', batch)),
        on_aborted=lambda: events.put(('aborted', None)),
        on_error=lambda exc: events.put(('error', exc)),
        on_completed=lambda stats: events.put(('completed', stats)),
    )
    status, payload, batches = _wait_for_outcome(events, controller)
    controller.wait()
    if status == 'error':
        raise click.ClickException(f'scan failed: {payload}')
    records = controller.results
    summary: dict[str, Any] = {
        'stage': 'scan',
        'status': status,
        'root': request.root,
        'records': len(records),
        'batches': batches,
        'timestamp': local_now(),
    }
    if status == 'completed':
        summary['skipped'] = payload.skipped_directories
    if export_path is not None:
        summary['exported'] = export_records(records, export_path)
        summary['export'] = str(export_path)
    click.echo(json.dumps(summary, ensure_ascii=False))
    if status == 'aborted':
        ctx.exit(EXIT_ABORTED)


if __name__ == '__main__':
    cli()
