"""
쉘 연동 모듈 - `sshx init -` 출력 (bash 자동 완성, ssh 별칭)
"""

from .namespace import list_hosts
from .settings import Settings


COMMAND_NAME = "sshx"
ALIASED_NAME = "ssh"
COMPLETION_FUNCTION = "_sshx"


def make_complete_commands(hosts: list[str]) -> list[str]:
    return [
        COMPLETION_FUNCTION
        + '(){ COMPREPLY=($(compgen -W "'
        + " ".join(hosts)
        + '" ${COMP_WORDS[COMP_CWORD]})) ; }',
        f"complete -F {COMPLETION_FUNCTION} {COMMAND_NAME}",
    ]


def make_alias_commands() -> list[str]:
    return [
        f"alias {ALIASED_NAME}={COMMAND_NAME}",
        f"complete -F {COMPLETION_FUNCTION} {ALIASED_NAME}",
    ]


def make_commands(settings: Settings) -> list[str]:
    """
    쉘에서 eval할 명령 목록 생성

    생성된 ssh 설정의 호스트 이름으로 자동 완성을 등록하고,
    EnableAlias가 켜져 있으면 ssh를 sshx 별칭으로 등록
    """
    path = settings.derived_config_path
    text = path.read_text(encoding="utf-8", errors="surrogateescape") if path.exists() else ""

    commands = make_complete_commands(list_hosts(text))
    if settings.enable_alias:
        commands.extend(make_alias_commands())
    return commands
