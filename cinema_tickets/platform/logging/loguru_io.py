from functools import wraps
import types
from typing import TYPE_CHECKING, Any, Callable, ParamSpec, TypeVar, cast, overload


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from cinema_tickets.platform.config.core_setting import settings
from cinema_tickets.platform.exception.exceptions import CustomBaseError
from cinema_tickets.platform.logging.loguru_io_config import (
    ExtraField,
    call_depth_var,
    custom_logger,
)
from cinema_tickets.platform.logging.loguru_io_utils import (
    build_call_target_func_path,
    get_chain_start_time,
    normalize_args_kwargs,
    reset_call_depth,
    truncate_content,
)

# TypeVar for preserving function type through decorator
_F = TypeVar('_F', bound=Callable[..., Any])


class LoguruIO:
    def __init__(
        self, custom_logger: 'LoguruLogger', *, reraise: bool = True, truncate_content: bool = False
    ) -> None:
        self._custom_logger = custom_logger
        self.reraise = reraise
        self.truncate_content = truncate_content
        self.call_target = ''
        self.depth = 2  # Adjusted for wrapper functions

    def bind_call_extra(self) -> dict[str, Any]:
        call_depth_var.set(call_depth_var.get() + 1)
        return {
            ExtraField.CALL_TARGET: self.call_target,
            ExtraField.CHAIN_START_TIME: get_chain_start_time(),
        }

    def log_args_kwargs_content(self, extra: dict[str, Any], *args: Any, **kwargs: Any) -> None:
        if settings.DEBUG:  # Skip formatting when not logging
            self._custom_logger.bind(**extra).opt(depth=self.depth).debug(
                f'args: {self.format_content(args)}, kwargs: {self.format_content(kwargs)}'
            )

    def log_return_content(self, extra: dict[str, Any], return_value: Any) -> None:
        if settings.DEBUG:
            self._custom_logger.bind(**extra).opt(depth=self.depth).debug(
                f'return: {self.format_content(return_value)}'
            )

    def log_exception(self, extra: dict[str, Any], e: Exception) -> None:
        # Skip if already logged (avoid duplicate logs when exception bubbles up)
        if getattr(e, '_has_logged', False):
            return
        e._has_logged = True  # type: ignore[attr-defined]
        if isinstance(e, CustomBaseError):
            self._custom_logger.bind(**extra).opt(depth=self.depth).error(
                f'{type(e).__name__}: {e}'
            )
        else:
            self._custom_logger.bind(**extra).opt(depth=self.depth).exception(
                f'{type(e).__name__}: {e}'
            )

    def _hide_from_traceback(self, func: Callable[..., Any]) -> Callable[..., Any]:
        func.__code__ = func.__code__.replace(  # type: ignore[attr-defined]
            co_filename=cast(types.FunctionType, self._custom_logger.catch).__code__.co_filename
        )
        return func

    def format_content(self, data: Any) -> Any:
        if not self.truncate_content:
            return data
        if isinstance(data, dict):
            return {key: self.format_content(value) for key, value in data.items()}
        if isinstance(data, list | tuple):
            return type(data)(self.format_content(item) for item in data)
        return truncate_content(data)

    def __call__(self, func: _F) -> _F:
        self.call_target = build_call_target_func_path(func)

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            extra = self.bind_call_extra()
            try:
                self.log_args_kwargs_content(extra, *args, **kwargs)
                args, kwargs = normalize_args_kwargs(func, *args, **kwargs)
                return_value = func(*args, **kwargs)
                self.log_return_content(extra, return_value)
                return return_value
            except Exception as e:
                self.log_exception(extra, e)
                if self.reraise:
                    raise
                return None
            finally:
                reset_call_depth()

        return cast(_F, self._hide_from_traceback(sync_wrapper))


_P = ParamSpec('_P')
_T = TypeVar('_T')


class Logger:
    base = custom_logger

    @overload
    @staticmethod
    def io(func: Callable[_P, _T]) -> Callable[_P, _T]: ...

    @overload
    @staticmethod
    def io(func: None = ..., *, reraise: bool = ..., truncate_content: bool = ...) -> LoguruIO: ...

    @staticmethod
    def io(
        func: Callable[_P, _T] | None = None, *, reraise: bool = True, truncate_content: bool = True
    ) -> Callable[_P, _T] | LoguruIO:
        if func:
            return LoguruIO(
                custom_logger=custom_logger, reraise=reraise, truncate_content=truncate_content
            )(func)
        return LoguruIO(
            custom_logger=custom_logger, reraise=reraise, truncate_content=truncate_content
        )
