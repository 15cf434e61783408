# geometry/transform.py
from typing import List, Tuple
from core.matrix import Matrix4, IDENTITY

class TransformStack:
    """
    A stack of (forward, inverse) matrix pairs for scene builders.

    Forward transforms compose in application order and inverses in
    reverse order, so the top pair always stays mutually inverse.
    """
    def __init__(self):
        self._stack: List[Tuple[Matrix4, Matrix4]] = [(IDENTITY, IDENTITY)]

    @property
    def top(self) -> Tuple[Matrix4, Matrix4]:
        return self._stack[-1]

    @property
    def forward(self) -> Matrix4:
        return self._stack[-1][0]

    @property
    def inverse(self) -> Matrix4:
        return self._stack[-1][1]

    def __len__(self) -> int:
        return len(self._stack)

    def push(self):
        self._stack.append(self._stack[-1])

    def pop(self):
        if len(self._stack) == 1:
            raise IndexError("Cannot pop the base transform")
        self._stack.pop()

    def apply(self, transform: Matrix4, inverse: Matrix4 = None):
        """
        Right-multiplies the top transform, so `transform` acts on object
        space before anything already on the stack.
        """
        if inverse is None:
            inverse = transform.inverse()
        forward, current_inverse = self._stack[-1]
        self._stack[-1] = (forward @ transform, inverse @ current_inverse)
