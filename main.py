"""lc 실행 진입점 (pyproject의 lc = "main:main")"""

from cli.app import cli


def main() -> None:
    cli(prog_name="lc")


if __name__ == "__main__":
    main()
