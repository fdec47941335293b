"""Shared save/plot orchestration for every plottable kind.

A kind only supplies two things: ``plotable_data`` (the rows of its data file)
and ``_script_body`` (the gnuplot text between the shared opening and closing
scripts). Writing files, header blocks, ids and launching gnuplot live here.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, ClassVar, Iterable, Iterator, List, NamedTuple, Optional, Tuple, Type, Union

from .configuration import Configuration
from .contracts.enums import Style
from .contracts.errors import NoDataError, SavingError, ValidationError
from .gnuplot.runner import GnuplotRunner

logger = logging.getLogger(__name__)

Bound = Optional[float]


def _write_text(path: Path, text: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise SavingError(f"could not write {path}: {exc}") from exc
    logger.debug("Wrote %s (%d bytes)", path, len(text))


class Configurable:
    """Fluent access to the ``Configuration`` owned by ``self.config``."""

    config: Configuration

    @property
    def configuration(self) -> Configuration:
        return self.config

    def set_title(self, title: object):
        self.config.set_title(title)
        return self

    def set_logx(self, base: float = 0):
        self.config.set_logx(base)
        return self

    def set_logy(self, base: float = 0):
        self.config.set_logy(base)
        return self

    def set_xlabel(self, label: object):
        self.config.set_xlabel(label)
        return self

    def set_ylabel(self, label: object):
        self.config.set_ylabel(label)
        return self

    def set_zlabel(self, label: object):
        self.config.set_zlabel(label)
        return self

    def set_xrange(self, low: Bound, high: Bound):
        self.config.set_xrange(low, high)
        return self

    def set_yrange(self, low: Bound, high: Bound):
        self.config.set_yrange(low, high)
        return self

    def set_xtics(self, tics: object):
        self.config.set_xtics(tics)
        return self

    def set_ytics(self, tics: object):
        self.config.set_ytics(tics)
        return self

    def set_style(self, style: Union[Style, str, int]):
        self.config.set_style(style)
        return self

    def set_dashtype(self, dashtype: int):
        self.config.set_dashtype(dashtype)
        return self

    def set_pause(self, seconds: float):
        self.config.set_pause(seconds)
        return self

    def set_directory(self, root: Union[str, Path]):
        self.config.set_directory(root)
        return self

    def set_extension(self, extension: str):
        self.config.set_extension(extension)
        return self

    def set_header(self, header: bool):
        self.config.set_header(header)
        return self

    def set_date(self, date: datetime):
        self.config.set_date(date)
        return self

    def set_id(self, id: object):
        self.config.set_id(id)
        return self

    def set_custom(self, key: str, value: object = ""):
        self.config.set_custom(key, value)
        return self

    @property
    def title(self) -> Optional[str]:
        return self.config.title

    @property
    def logx(self) -> Optional[float]:
        return self.config.logx

    @property
    def logy(self) -> Optional[float]:
        return self.config.logy

    @property
    def xlabel(self) -> Optional[str]:
        return self.config.xlabel

    @property
    def ylabel(self) -> Optional[str]:
        return self.config.ylabel

    @property
    def zlabel(self) -> Optional[str]:
        return self.config.zlabel

    @property
    def xrange(self) -> Optional[Tuple[Bound, Bound]]:
        return self.config.xrange

    @property
    def yrange(self) -> Optional[Tuple[Bound, Bound]]:
        return self.config.yrange

    @property
    def xtics(self) -> Optional[str]:
        return self.config.xtics

    @property
    def ytics(self) -> Optional[str]:
        return self.config.ytics

    @property
    def style(self) -> Style:
        return self.config.style

    @property
    def dashtype(self) -> Optional[int]:
        return self.config.dashtype

    @property
    def pause(self) -> Optional[float]:
        return self.config.pause

    @property
    def directory(self) -> Path:
        return self.config.directory

    @property
    def extension(self) -> str:
        return self.config.extension

    @property
    def header(self) -> bool:
        return self.config.header

    @property
    def date(self) -> datetime:
        return self.config.date

    @property
    def id(self) -> Optional[str]:
        return self.config.id

    def checked_id(self) -> str:
        return self.config.checked_id()

    def get_custom(self, key: str) -> Optional[str]:
        return self.config.get_custom(key)

    def data_path(self) -> Path:
        return self.config.data_path()

    def plot_path(self) -> Path:
        return self.config.plot_path()

    def data_path_for(self, id: object) -> Path:
        return self.config.save_config.data_path_for(str(id))


class Saveable(Configurable):
    def plotable_data(self) -> str:
        raise NotImplementedError

    def save_with_id(self, id: object):
        """Write the data file for ``id`` (header block first when enabled)."""
        id = str(id)
        path = self.data_path_for(id)
        text = self.config.save_config.header_block(id, self.title) + self.plotable_data()
        _write_text(path, text)
        logger.info("Saved %s data to %s", type(self).__name__, path)
        return self

    def save(self):
        return self.save_with_id(self.checked_id())


class Plotable(Saveable):
    comparison: ClassVar[bool] = False
    runner_class: ClassVar[Type[GnuplotRunner]] = GnuplotRunner

    def _script_body(self) -> str:
        raise NotImplementedError

    def plot_script(self) -> str:
        return (
            self.config.opening_script(comparison=self.comparison)
            + self._script_body()
            + self.config.closing_script()
        )

    def write_plot_script(self) -> Path:
        path = self.plot_path()
        _write_text(path, self.plot_script())
        logger.info("Saved %s plot script to %s", type(self).__name__, path)
        return path

    def plot_later(self, id: object):
        """Write script and data for ``id`` without launching gnuplot."""
        self.set_id(id)
        self.write_plot_script()
        self.save_with_id(self.checked_id())
        return self

    def plot(self, id: object):
        """``plot_later`` and then launch gnuplot on the script, fire-and-forget."""
        self.plot_later(id)
        self.runner_class().spawn(self.plot_path())
        return self


class Entity(Plotable):
    """One data set together with its own configuration."""

    comparison_class: ClassVar[Optional[Type["Comparison"]]] = None

    def __init__(self, style: Union[Style, str, int] = Style.default) -> None:
        self.config = Configuration(style)

    def _warn_if_empty(self, data: Any) -> None:
        if len(data) == 0:
            logger.warning("%s has no data", type(self).__name__)

    def to_comparison(self) -> "Comparison":
        if self.comparison_class is None:
            raise ValidationError(f"{type(self).__name__} cannot be compared")
        return self.comparison_class([self])

    def compare_with(self, others: Iterable["Entity"]) -> "Comparison":
        comparison = self.to_comparison()
        comparison.add_many(others)
        return comparison

    def __add__(self, other: Any) -> "Comparison":
        if self.comparison_class is None:
            return NotImplemented
        if isinstance(other, self.comparison_class):
            comparison = self.to_comparison()
            comparison.add_many(other.data_set)
            return comparison
        if isinstance(other, type(self)):
            return self.compare_with([other])
        return NotImplemented


class Series(NamedTuple):
    """Resolved per-child drawing options inside a comparison."""

    index: int
    entity: Entity
    path: Path
    legend: str
    style: Style
    dashtype: int


class Comparison(Plotable):
    """Several entities of one kind plotted together with one shared configuration."""

    comparison = True
    entity_class: ClassVar[Type[Entity]] = Entity

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.entity_class is not Entity:
            cls.entity_class.comparison_class = cls

    def __init__(self, data_set: Iterable[Entity] = ()) -> None:
        self.config = Configuration()
        self.data_set: List[Entity] = []
        self.add_many(data_set)

    def __len__(self) -> int:
        return len(self.data_set)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self.data_set)

    def __getitem__(self, index: int) -> Entity:
        return self.data_set[index]

    def add(self, entity: Entity):
        if not isinstance(entity, self.entity_class):
            raise ValidationError(
                f"{type(self).__name__} only holds {self.entity_class.__name__}, got {type(entity).__name__}"
            )
        self.data_set.append(entity)
        return self

    def add_many(self, entities: Iterable[Entity]):
        for entity in entities:
            self.add(entity)
        return self

    def __add__(self, other: Any) -> "Comparison":
        if isinstance(other, (type(self), self.entity_class)):
            combined = type(self)(self.data_set)
            combined.config = self.config.copy()
            combined += other
            return combined
        return NotImplemented

    def __iadd__(self, other: Any) -> "Comparison":
        if isinstance(other, type(self)):
            return self.add_many(other.data_set)
        if isinstance(other, self.entity_class):
            return self.add(other)
        return NotImplemented

    @staticmethod
    def inner_id(id: str, index: int) -> str:
        return f"{id}_{index}"

    def inner_data_path(self, index: int) -> Path:
        return self.data_set[index].data_path_for(self.inner_id(self.checked_id(), index))

    def plot_script(self) -> str:
        if not self.data_set:
            raise NoDataError(f"{type(self).__name__} holds nothing to plot")
        return super().plot_script()

    def plotable_data(self) -> str:
        return "".join(entity.plotable_data() + "\n" for entity in self.data_set)

    def save_with_id(self, id: object):
        id = str(id)
        for index, entity in enumerate(self.data_set):
            entity.save_with_id(self.inner_id(id, index))
        return self

    def series(self) -> List[Series]:
        """Legend, style and dashtype per child, in plotting order.

        The aggregate style and dashtype win when set explicitly; otherwise
        each child keeps its own. Setting the aggregate style to
        ``Style.default`` means "no override", so every child keeps its own
        style. Children without a dashtype get 1, 2, 3...
        """
        style_override = self.config.style_override
        if style_override is Style.default:
            style_override = None
        counter = 0
        resolved = []
        for index, entity in enumerate(self.data_set):
            legend = entity.title if entity.title is not None else str(index)
            style = style_override if style_override is not None else entity.style
            dashtype = self.config.dashtype
            if dashtype is None:
                dashtype = entity.dashtype
            if dashtype is None:
                counter += 1
                dashtype = counter
            resolved.append(Series(index, entity, self.inner_data_path(index), legend, style, dashtype))
        return resolved
