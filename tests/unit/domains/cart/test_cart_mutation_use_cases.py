"""
Unit Tests for Cart Mutation Use Cases

Add item, update quantity, remove item, clear cart.
"""

from decimal import Decimal

import pytest

from storefront.domains.cart.application.ports import CartItemWithVariant
from storefront.domains.cart.application.use_cases import (
    AddItemRequest,
    AddItemToCartUseCase,
    ClearCartAfterOrderUseCase,
    ClearCartByIdentityRequest,
    ClearCartUseCase,
    RemoveCartItemUseCase,
    UpdateCartItemRequest,
    UpdateCartItemUseCase,
)
from storefront.domains.cart.domain.exceptions import (
    CartIdentifierRequiredException,
    CartItemNotFoundException,
    InsufficientStockException,
    InvalidQuantityException,
    VariantNotFoundException,
    VariantUnavailableException,
)


class TestAddItemToCartUseCase:
    """Test cases for AddItemToCartUseCase"""

    @pytest.fixture
    def use_case(self, mock_cart_repository, mock_cache):
        return AddItemToCartUseCase(cart_repository=mock_cart_repository, cache=mock_cache)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("quantity", [0, -1])
    async def test_rejects_non_positive_quantity(self, use_case, mock_cart_repository, mock_cache, quantity):
        with pytest.raises(InvalidQuantityException):
            await use_case.execute(AddItemRequest(cart_id="c1", variant_id="v1", quantity=quantity))

        mock_cart_repository.get_variant_info.assert_not_called()
        mock_cache.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_variant_not_found(self, use_case, mock_cart_repository):
        mock_cart_repository.get_variant_info.return_value = None

        with pytest.raises(VariantNotFoundException) as exc_info:
            await use_case.execute(AddItemRequest(cart_id="c1", variant_id="missing", quantity=1))

        assert exc_info.value.message == "Product variant not found"
        mock_cart_repository.add_or_update_item.assert_not_called()

    @pytest.mark.asyncio
    async def test_unpublished_variant(self, use_case, mock_cart_repository, mock_cache, make_variant):
        mock_cart_repository.get_variant_info.return_value = make_variant(product_status="DRAFT")

        with pytest.raises(VariantUnavailableException) as exc_info:
            await use_case.execute(AddItemRequest(cart_id="c1", variant_id="v1", quantity=1))

        assert exc_info.value.message == "Product is not available (status: DRAFT)"
        assert exc_info.value.code == "VARIANT_UNAVAILABLE"
        mock_cart_repository.add_or_update_item.assert_not_called()
        mock_cache.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_snapshots_sale_price(self, use_case, mock_cart_repository, mock_cache, make_variant, make_item):
        # Arrange
        mock_cart_repository.get_variant_info.return_value = make_variant(price=1200, sale_price=999)
        mock_cart_repository.add_or_update_item.return_value = make_item(cart_id="c1", quantity=2, price=999)

        # Act
        result = await use_case.execute(AddItemRequest(cart_id="c1", variant_id="v1", quantity=2))

        # Assert
        mock_cart_repository.add_or_update_item.assert_awaited_once_with(
            cart_id="c1", variant_id="v1", quantity=2, price_snapshot=Decimal("999")
        )
        mock_cache.delete.assert_awaited_once_with("cart:c1")
        assert result.quantity == 2
        assert result.price_at_add == Decimal("999")

    @pytest.mark.asyncio
    async def test_snapshots_list_price_without_sale(self, use_case, mock_cart_repository, make_variant, make_item):
        mock_cart_repository.get_variant_info.return_value = make_variant(price=1200)
        mock_cart_repository.add_or_update_item.return_value = make_item(price=1200)

        await use_case.execute(AddItemRequest(cart_id="c1", variant_id="v1", quantity=1))

        assert mock_cart_repository.add_or_update_item.call_args.kwargs["price_snapshot"] == Decimal("1200")

    @pytest.mark.asyncio
    async def test_invalidation_runs_after_write(self, use_case, mock_cart_repository, mock_cache, make_variant, make_item):
        order: list[str] = []
        mock_cart_repository.get_variant_info.return_value = make_variant()

        async def write(**kwargs):
            order.append("write")
            return make_item()

        async def invalidate(key):
            order.append("invalidate")
            return True

        mock_cart_repository.add_or_update_item.side_effect = write
        mock_cache.delete.side_effect = invalidate

        await use_case.execute(AddItemRequest(cart_id="c1", variant_id="v1", quantity=1))

        assert order == ["write", "invalidate"]


class TestUpdateCartItemUseCase:
    """Test cases for UpdateCartItemUseCase"""

    @pytest.fixture
    def use_case(self, mock_cart_repository, mock_cache):
        return UpdateCartItemUseCase(cart_repository=mock_cart_repository, cache=mock_cache)

    @pytest.fixture
    def existing(self, make_item, make_variant):
        return CartItemWithVariant(
            item=make_item(item_id="item-1", cart_id="cart-1", quantity=2),
            variant=make_variant(stock_quantity=10),
        )

    @pytest.mark.asyncio
    async def test_negative_quantity_short_circuits(self, use_case, mock_cart_repository):
        with pytest.raises(InvalidQuantityException):
            await use_case.execute(UpdateCartItemRequest(item_id="item-1", quantity=-1))

        mock_cart_repository.get_cart_item_with_variant.assert_not_called()
        assert mock_cart_repository.mock_calls == []

    @pytest.mark.asyncio
    async def test_item_not_found(self, use_case, mock_cart_repository):
        mock_cart_repository.get_cart_item_with_variant.return_value = None

        with pytest.raises(CartItemNotFoundException) as exc_info:
            await use_case.execute(UpdateCartItemRequest(item_id="missing", quantity=1))

        assert exc_info.value.message == "Cart item not found"
        assert exc_info.value.code == "CART_ITEM_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_zero_quantity_removes_item(self, use_case, mock_cart_repository, mock_cache, existing):
        # Arrange
        mock_cart_repository.get_cart_item_with_variant.return_value = existing

        # Act
        result = await use_case.execute(UpdateCartItemRequest(item_id="item-1", quantity=0))

        # Assert
        assert result is None
        mock_cart_repository.remove_item.assert_awaited_once_with("item-1")
        mock_cart_repository.update_item_quantity.assert_not_called()
        mock_cache.delete.assert_awaited_once_with("cart:cart-1")

    @pytest.mark.asyncio
    async def test_zero_quantity_removes_even_unavailable_item(
        self, use_case, mock_cart_repository, make_item, make_variant
    ):
        mock_cart_repository.get_cart_item_with_variant.return_value = CartItemWithVariant(
            item=make_item(), variant=make_variant(product_status="ARCHIVED", stock_quantity=0)
        )

        assert await use_case.execute(UpdateCartItemRequest(item_id="item-1", quantity=0)) is None
        mock_cart_repository.remove_item.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unavailable_variant(self, use_case, mock_cart_repository, mock_cache, make_item, make_variant):
        mock_cart_repository.get_cart_item_with_variant.return_value = CartItemWithVariant(
            item=make_item(), variant=make_variant(product_status="ARCHIVED")
        )

        with pytest.raises(VariantUnavailableException):
            await use_case.execute(UpdateCartItemRequest(item_id="item-1", quantity=1))

        mock_cart_repository.update_item_quantity.assert_not_called()
        mock_cache.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_quantity_equal_to_stock_succeeds(
        self, use_case, mock_cart_repository, mock_cache, existing, make_item
    ):
        mock_cart_repository.get_cart_item_with_variant.return_value = existing
        mock_cart_repository.update_item_quantity.return_value = make_item(
            item_id="item-1", cart_id="cart-1", quantity=10
        )

        result = await use_case.execute(UpdateCartItemRequest(item_id="item-1", quantity=10))

        assert result.quantity == 10
        mock_cart_repository.update_item_quantity.assert_awaited_once_with("item-1", 10)
        mock_cache.delete.assert_awaited_once_with("cart:cart-1")

    @pytest.mark.asyncio
    async def test_quantity_above_stock_fails(self, use_case, mock_cart_repository, mock_cache, existing):
        mock_cart_repository.get_cart_item_with_variant.return_value = existing

        with pytest.raises(InsufficientStockException) as exc_info:
            await use_case.execute(UpdateCartItemRequest(item_id="item-1", quantity=11))

        assert exc_info.value.message == "Insufficient stock. Only 10 items available."
        assert exc_info.value.code == "INSUFFICIENT_STOCK"
        mock_cart_repository.update_item_quantity.assert_not_called()
        mock_cache.delete.assert_not_called()


class TestRemoveCartItemUseCase:
    """Test cases for RemoveCartItemUseCase"""

    @pytest.mark.asyncio
    async def test_removes_and_invalidates(self, mock_cart_repository, mock_cache, make_item, make_variant):
        mock_cart_repository.get_cart_item_with_variant.return_value = CartItemWithVariant(
            item=make_item(item_id="item-1", cart_id="cart-9"), variant=make_variant()
        )
        use_case = RemoveCartItemUseCase(mock_cart_repository, mock_cache)

        await use_case.execute("item-1")

        mock_cart_repository.remove_item.assert_awaited_once_with("item-1")
        mock_cache.delete.assert_awaited_once_with("cart:cart-9")

    @pytest.mark.asyncio
    async def test_missing_item(self, mock_cart_repository, mock_cache):
        mock_cart_repository.get_cart_item_with_variant.return_value = None
        use_case = RemoveCartItemUseCase(mock_cart_repository, mock_cache)

        with pytest.raises(CartItemNotFoundException):
            await use_case.execute("missing")

        mock_cart_repository.remove_item.assert_not_called()


class TestClearCartUseCases:
    """Test cases for ClearCartUseCase and ClearCartAfterOrderUseCase"""

    @pytest.mark.asyncio
    async def test_clear_cart(self, mock_cart_repository, mock_cache):
        use_case = ClearCartUseCase(mock_cart_repository, mock_cache)

        await use_case.execute("cart-1")

        mock_cart_repository.clear_cart.assert_awaited_once_with("cart-1")
        mock_cache.delete.assert_awaited_once_with("cart:cart-1")

    @pytest.mark.asyncio
    async def test_clear_after_order_prefers_user_cart(self, mock_cart_repository, mock_cache, make_cart):
        mock_cart_repository.find_by_user_id.return_value = make_cart(cart_id="user-cart", user_id="u1", session_id=None)
        use_case = ClearCartAfterOrderUseCase(mock_cart_repository, mock_cache)

        await use_case.execute(ClearCartByIdentityRequest(user_id="u1", session_id="s1"))

        mock_cart_repository.find_by_session_id.assert_not_called()
        mock_cart_repository.clear_cart.assert_awaited_once_with("user-cart")
        mock_cache.delete.assert_awaited_once_with("cart:user-cart")

    @pytest.mark.asyncio
    async def test_clear_after_order_falls_back_to_session(self, mock_cart_repository, mock_cache, make_cart):
        mock_cart_repository.find_by_user_id.return_value = None
        mock_cart_repository.find_by_session_id.return_value = make_cart(cart_id="guest-cart", session_id="s1")
        use_case = ClearCartAfterOrderUseCase(mock_cart_repository, mock_cache)

        await use_case.execute(ClearCartByIdentityRequest(user_id="u1", session_id="s1"))

        mock_cart_repository.clear_cart.assert_awaited_once_with("guest-cart")

    @pytest.mark.asyncio
    async def test_clear_after_order_without_cart_is_noop(self, mock_cart_repository, mock_cache):
        mock_cart_repository.find_by_session_id.return_value = None
        use_case = ClearCartAfterOrderUseCase(mock_cart_repository, mock_cache)

        await use_case.execute(ClearCartByIdentityRequest(session_id="s1"))

        mock_cart_repository.clear_cart.assert_not_called()
        mock_cache.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_clear_after_order_requires_identity(self, mock_cart_repository, mock_cache):
        use_case = ClearCartAfterOrderUseCase(mock_cart_repository, mock_cache)

        with pytest.raises(CartIdentifierRequiredException):
            await use_case.execute(ClearCartByIdentityRequest())
