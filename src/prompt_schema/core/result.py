"""Result 타입과 Railway 파이프라인"""
from dataclasses import dataclass
from typing import TypeVar, Generic, Callable, Union

T = TypeVar('T')
U = TypeVar('U')
E = TypeVar('E')


# ============================================================
# Result Type (OR Type)
# ============================================================

@dataclass(frozen=True)
class Success(Generic[T]):
    """성공 트랙"""
    value: T

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclass(frozen=True)
class Failure(Generic[E]):
    """실패 트랙"""
    error: E

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


Result = Union[Success[T], Failure[E]]


def bind(result: Result[T, E], f: Callable[[T], Result[U, E]]) -> Result[U, E]:
    """Result 반환 함수 체이닝"""
    match result:
        case Success(value):
            return f(value)
        case Failure() as err:
            return err


# ============================================================
# Railway 파이프라인 빌더
# ============================================================

class Railway(Generic[T, E]):
    """Fluent Railway 파이프라인"""

    def __init__(self, result: Result[T, E]):
        self._result = result

    @classmethod
    def from_result(cls, result: Result[T, E]) -> 'Railway[T, E]':
        return cls(result)

    def bind(self, f: Callable[[T], Result[U, E]]) -> 'Railway[U, E]':
        return Railway(bind(self._result, f))

    def bind_if(self, condition: bool, f: Callable[[T], Result[T, E]]) -> 'Railway[T, E]':
        """condition 이 참일 때만 bind"""
        return self.bind(f) if condition else self

    def unwrap(self) -> Result[T, E]:
        """최종 Result 반환"""
        return self._result
