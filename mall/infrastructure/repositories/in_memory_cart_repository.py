"""カートリポジトリのインメモリ実装."""
from mall.domain.entities import Cart
from mall.domain.identifiers import CartId, UserId
from mall.domain.ports import CartRepository


class InMemoryCartRepository(CartRepository):
    """カートリポジトリのインメモリ実装.

    ユーザーごとに最後に保存したカートを索引に持つ。
    """

    def __init__(self) -> None:
        """初期化."""
        self._carts: dict[str, Cart] = {}
        self._cart_ids_by_user: dict[str, str] = {}

    def save(self, cart: Cart) -> None:
        """カートを保存する."""
        self._carts[cart.cart_id.value] = cart
        if cart.user_id is not None:
            self._cart_ids_by_user[cart.user_id.value] = cart.cart_id.value

    def find_by_id(self, cart_id: CartId) -> Cart | None:
        """カートIDで検索する."""
        return self._carts.get(cart_id.value)

    def find_by_user_id(self, user_id: UserId) -> Cart | None:
        """ユーザーが最後に保存したカートを返す."""
        cart_id = self._cart_ids_by_user.get(user_id.value)
        if cart_id is None:
            return None
        return self._carts.get(cart_id)
