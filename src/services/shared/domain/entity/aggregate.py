from typing import TypeVar

from .entity import Entity

ID = TypeVar("ID")


class AggregateRoot(Entity[ID]):
    """AggregateRoot 基底クラス

    - 永続化の単位 = 集約境界（1アイテムに丸ごと保存する）
    - version は読み込み時点の版。保存側が条件付き書き込みに使う
    - 変更はドメインイベントとして記録し、保存後にまとめて取り出す
    """

    def __init__(self, id: ID, version: int = 0) -> None:
        super().__init__(id)
        self._version = version
        self._domain_events: list[object] = []

    @property
    def version(self) -> int:
        return self._version

    def increment_version(self) -> None:
        """保存に成功した後、版を進める"""
        self._version += 1

    def add_domain_event(self, event: object) -> None:
        self._domain_events.append(event)

    def flush_domain_events(self) -> list[object]:
        """記録済みのイベントを返し、記録を空にする"""
        events = self._domain_events.copy()
        self._domain_events.clear()
        return events
