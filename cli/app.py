"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반의 CLI 애플리케이션 진입점입니다.

명령어 구조:
    lc                      # 도움말 표시
    lc --version            # 버전 표시
    lc clean [옵션]          # Lambda 버전 정리
    lc version              # 버전 및 새 릴리스 확인

    예시:
    lc clean -r us-east-1            # $LATEST와 최신 1개 버전만 유지
    lc clean -r us-east-1 -c 3 -d    # 최신 3개 유지, 드라이런
    lc --lang en clean -p my-profile

Usage:
    # 명령줄에서 직접 실행
    $ lc clean -r us-east-1

    # 모듈로 실행
    $ python -m cli.app
"""

import logging

import click
from click import Context

from cli.i18n import t
from core.config import DEFAULT_MAX_WORKERS, DEFAULT_RETAIN, MAX_WORKERS_LIMIT, get_version

logger = logging.getLogger(__name__)

VERSION = get_version()


def _build_help_text(lang: str = "ko") -> str:
    """help 텍스트 생성"""
    return "\n".join(
        [
            "LC - Lambda Cleanup CLI",
            "",
            t("cli.help_intro", lang=lang),
            "",
            "\b",  # Click 줄바꿈 유지 마커
            t("cli.help_basic_usage", lang=lang),
            f"  lc clean -r <region>          {t('cli.help_clean', lang=lang)}",
            f"  lc clean -r <region> -d       {t('cli.help_dry_run', lang=lang)}",
            f"  lc version                    {t('cli.help_version', lang=lang)}",
            "",
            "\b",
            t("cli.help_examples", lang=lang),
            "  lc clean -r us-east-1 -c 3",
            "  lc clean -p my-profile -l lambdas.yaml -s",
        ]
    )


@click.group(invoke_without_command=True)
@click.version_option(VERSION, prog_name="lc")
@click.option(
    "--lang",
    type=click.Choice(["ko", "en"]),
    default="ko",
    help="UI 언어 설정 / UI language (ko: 한국어, en: English)",
)
@click.pass_context
def cli(ctx: Context, lang: str) -> None:
    """LC - Lambda Cleanup CLI"""
    from cli.i18n import set_lang

    set_lang(lang)

    # 서브 명령어에서 사용할 언어 저장
    ctx.ensure_object(dict)
    ctx.obj["lang"] = lang

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# help 텍스트 동적 설정
cli.help = _build_help_text()


@cli.command("clean")
@click.option("-r", "--region", default="", help="대상 AWS 리전 (없으면 AWS_DEFAULT_REGION)")
@click.option("-p", "--profile", default="", help="인증에 사용할 AWS 프로파일 (없으면 AWS_PROFILE)")
@click.option(
    "-c",
    "--count",
    "retain",
    type=int,
    default=DEFAULT_RETAIN,
    show_default=True,
    help="$LATEST를 제외하고 유지할 최신 버전 수",
)
@click.option("-d", "--dryrun", "dry_run", is_flag=True, help="삭제 없이 결과만 미리 보기")
@click.option("-v", "--verbose", is_flag=True, help="디버그 로그 출력")
@click.option("-s", "--skipAliases", "skip_aliases", is_flag=True, help="Alias가 가리키는 버전은 삭제하지 않음")
@click.option(
    "-l",
    "--listFile",
    "list_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="정리할 함수 목록 파일 (JSON/YAML)",
)
@click.option("-i", "--size-iec", "size_iec", is_flag=True, help="용량을 IEC 단위(KiB, MiB)로 표시")
@click.option("-m", "--moreLambdaDetails", "more_details", is_flag=True, help="함수별 삭제 대상 버전 수 표시")
@click.option(
    "-w",
    "--max-workers",
    "max_workers",
    type=click.IntRange(1, MAX_WORKERS_LIMIT),
    default=DEFAULT_MAX_WORKERS,
    show_default=True,
    help="동시 삭제 요청 수",
)
def clean_command(
    region: str,
    profile: str,
    retain: int,
    dry_run: bool,
    verbose: bool,
    skip_aliases: bool,
    list_file: str | None,
    size_iec: bool,
    more_details: bool,
    max_workers: int,
) -> None:
    """$LATEST와 최신 N개를 제외한 Lambda 버전 삭제

    \b
    Examples:
        lc clean -r us-east-1              # 최신 1개 버전 유지
        lc clean -r us-east-1 -c 3 -d      # 최신 3개 유지, 드라이런
        lc clean -l lambdas.json -m        # 지정된 함수만, 상세 출력
    """
    from cli.clean import run_clean
    from cli.ui.console import setup_logging
    from core.config import CleanupConfig

    setup_logging(verbose)

    config = CleanupConfig(
        region=region,
        profile=profile,
        retain=retain,
        verbose=verbose,
        dry_run=dry_run,
        list_file=list_file,
        more_details=more_details,
        size_iec=size_iec,
        skip_aliases=skip_aliases,
        max_workers=max_workers,
    )

    raise SystemExit(run_clean(config))


@cli.command("version")
def version_command() -> None:
    """버전 출력 및 새 릴리스 확인"""
    from cli.ui.console import print_error, setup_logging
    from cli.version import check_for_new_release
    from core.config import get_user_agent
    from core.exceptions import ReleaseCheckError

    setup_logging()

    logger.info(f"lambda-cleanup v{VERSION}")

    try:
        _, message = check_for_new_release(VERSION, get_user_agent())
    except ReleaseCheckError as e:
        print_error(t("cli.version_check_failed", message=str(e)))
        raise SystemExit(1) from e

    logger.info(message)


if __name__ == "__main__":
    cli()
