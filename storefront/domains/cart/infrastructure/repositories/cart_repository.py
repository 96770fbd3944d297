"""
Cart Repository Implementation

SQLAlchemy implementation of ICartRepository.
"""

from datetime import UTC, datetime
from decimal import Decimal

from sqlalchemy import delete, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from storefront.core.shared.logger import get_repository_logger
from storefront.domains.cart.application.ports import (
    CartItemWithVariant,
    CartWithItems,
    ICartRepository,
)
from storefront.domains.cart.domain.entities import Cart, CartItem
from storefront.domains.cart.domain.exceptions import CartItemNotFoundException
from storefront.domains.cart.domain.value_objects import VariantSnapshot, to_decimal
from storefront.models.db.base import new_id
from storefront.models.db.cart import Cart as CartModel
from storefront.models.db.cart import CartItem as CartItemModel
from storefront.models.db.catalog import ProductVariant as ProductVariantModel

logger = get_repository_logger("cart")

_UPSERT_DIALECTS = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


class SQLAlchemyCartRepository(ICartRepository):
    """
    SQLAlchemy implementation of cart repository.

    Every mutating method commits before returning and rolls back on failure.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    # ==================== Carts ====================

    async def find_by_id(self, cart_id: str) -> Cart | None:
        model = await self._get_cart_model(CartModel.id == cart_id)
        return self._to_cart(model) if model else None

    async def find_by_user_id(self, user_id: str) -> Cart | None:
        model = await self._get_cart_model(CartModel.user_id == user_id)
        return self._to_cart(model) if model else None

    async def find_by_session_id(self, session_id: str) -> Cart | None:
        model = await self._get_cart_model(CartModel.session_id == session_id)
        return self._to_cart(model) if model else None

    async def create_cart(self, user_id: str | None = None, session_id: str | None = None) -> Cart:
        """Create an empty cart; the owner is validated before the insert."""
        cart = Cart.create(id=new_id(), user_id=user_id, session_id=session_id)
        model = CartModel(id=cart.id, user_id=cart.user_id, session_id=cart.session_id)
        try:
            self.session.add(model)
            await self.session.commit()
            await self.session.refresh(model)
            return self._to_cart(model)
        except Exception as e:
            logger.error(f"Error creating cart: {e}", user_id=user_id, session_id=session_id)
            await self.session.rollback()
            raise

    async def merge_guest_cart(self, user_id: str, session_id: str) -> Cart:
        """Merge the session's cart into the user's cart in one transaction."""
        guest = await self._get_cart_model(CartModel.session_id == session_id, with_items=True)
        user_cart = await self._get_cart_model(CartModel.user_id == user_id, with_items=True)

        if guest is None or not guest.items:
            if user_cart is not None:
                return self._to_cart(user_cart)
            return await self.create_cart(user_id=user_id)

        try:
            if user_cart is None:
                guest.user_id = user_id
                guest.session_id = None
                await self.session.commit()
                await self.session.refresh(guest)
                logger.info("Reassigned guest cart to user", cart_id=guest.id, user_id=user_id)
                return self._to_cart(guest)

            user_items = {item.variant_id: item for item in user_cart.items}
            for guest_item in list(guest.items):
                existing = user_items.get(guest_item.variant_id)
                if existing is not None:
                    existing.quantity = existing.quantity + guest_item.quantity
                    existing.price_at_add = min(
                        to_decimal(existing.price_at_add), to_decimal(guest_item.price_at_add)
                    )
                else:
                    guest.items.remove(guest_item)
                    user_cart.items.append(guest_item)

            await self.session.delete(guest)
            user_cart.updated_at = datetime.now(UTC)
            await self.session.commit()
            await self.session.refresh(user_cart)
            logger.info("Merged guest cart into user cart", cart_id=user_cart.id, user_id=user_id)
            return self._to_cart(user_cart)

        except Exception as e:
            logger.error(f"Error merging guest cart: {e}", user_id=user_id, session_id=session_id)
            await self.session.rollback()
            raise

    async def get_cart_with_items(
        self,
        cart_id: str | None = None,
        user_id: str | None = None,
        session_id: str | None = None,
    ) -> CartWithItems | None:
        conditions = []
        if cart_id is not None:
            conditions.append(CartModel.id == cart_id)
        if user_id is not None:
            conditions.append(CartModel.user_id == user_id)
        if session_id is not None:
            conditions.append(CartModel.session_id == session_id)
        if not conditions:
            return None

        result = await self.session.execute(
            select(CartModel)
            .options(
                selectinload(CartModel.items)
                .selectinload(CartItemModel.variant)
                .selectinload(ProductVariantModel.product)
            )
            .where(*conditions)
            .execution_options(populate_existing=True)
        )
        model = result.scalar_one_or_none()
        if model is None:
            return None

        cart = self._to_cart(model)
        entries = [
            CartItemWithVariant(item=self._to_item(item), variant=self._to_variant(item.variant))
            for item in model.items
        ]
        cart.replace_items([entry.item for entry in entries])
        return CartWithItems(cart=cart, items=entries)

    async def delete_cart(self, cart_id: str) -> None:
        try:
            await self.session.execute(delete(CartItemModel).where(CartItemModel.cart_id == cart_id))
            await self.session.execute(delete(CartModel).where(CartModel.id == cart_id))
            await self.session.commit()
        except Exception as e:
            logger.error(f"Error deleting cart: {e}", cart_id=cart_id)
            await self.session.rollback()
            raise

    # ==================== Items ====================

    async def add_or_update_item(
        self,
        cart_id: str,
        variant_id: str,
        quantity: int,
        price_snapshot: int | float | str | Decimal,
    ) -> CartItem:
        """
        Single-statement upsert on (cart_id, variant_id).

        INSERT ... ON CONFLICT DO UPDATE SET quantity = quantity + excluded.quantity,
        price_at_add = excluded.price_at_add
        """
        # validates quantity and price before touching the database
        candidate = CartItem.create(
            cart_id=cart_id,
            variant_id=variant_id,
            quantity=quantity,
            price_at_add=price_snapshot,
            id=new_id(),
        )

        insert = self._insert_for_dialect()
        stmt = insert(CartItemModel).values(
            id=candidate.id,
            cart_id=candidate.cart_id,
            variant_id=candidate.variant_id,
            quantity=candidate.quantity,
            price_at_add=candidate.price_at_add,
            created_at=candidate.created_at,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[CartItemModel.cart_id, CartItemModel.variant_id],
            set_={
                "quantity": CartItemModel.quantity + stmt.excluded.quantity,
                "price_at_add": stmt.excluded.price_at_add,
            },
        ).returning(CartItemModel.id)

        try:
            result = await self.session.execute(stmt)
            item_id = result.scalar_one()
            await self._touch_cart(cart_id)
            await self.session.commit()
            model = await self._get_item_model(item_id)
            return self._to_item(model)  # type: ignore[arg-type]
        except Exception as e:
            logger.error(f"Error adding item to cart: {e}", cart_id=cart_id, variant_id=variant_id)
            await self.session.rollback()
            raise

    async def update_item_quantity(self, item_id: str, quantity: int) -> CartItem:
        model = await self._get_item_model(item_id)
        if model is None:
            raise CartItemNotFoundException(item_id)

        item = self._to_item(model)
        item.set_quantity(quantity)

        try:
            model.quantity = item.quantity
            await self._touch_cart(item.cart_id)
            await self.session.commit()
            return item
        except Exception as e:
            logger.error(f"Error updating cart item quantity: {e}", item_id=item_id)
            await self.session.rollback()
            raise

    async def remove_item(self, item_id: str) -> None:
        try:
            result = await self.session.execute(
                delete(CartItemModel).where(CartItemModel.id == item_id).returning(CartItemModel.cart_id)
            )
            cart_id = result.scalar_one_or_none()
            if cart_id is not None:
                await self._touch_cart(cart_id)
            await self.session.commit()
        except Exception as e:
            logger.error(f"Error removing cart item: {e}", item_id=item_id)
            await self.session.rollback()
            raise

    async def clear_cart(self, cart_id: str) -> None:
        try:
            await self.session.execute(delete(CartItemModel).where(CartItemModel.cart_id == cart_id))
            await self._touch_cart(cart_id)
            await self.session.commit()
        except Exception as e:
            logger.error(f"Error clearing cart: {e}", cart_id=cart_id)
            await self.session.rollback()
            raise

    # ==================== Variants ====================

    async def get_variant_info(self, variant_id: str) -> VariantSnapshot | None:
        result = await self.session.execute(
            select(ProductVariantModel)
            .options(selectinload(ProductVariantModel.product))
            .where(ProductVariantModel.id == variant_id)
        )
        model = result.scalar_one_or_none()
        return self._to_variant(model) if model else None

    async def get_cart_item_with_variant(self, item_id: str) -> CartItemWithVariant | None:
        model = await self._get_item_model(item_id)
        if model is None or model.variant is None:
            return None
        return CartItemWithVariant(item=self._to_item(model), variant=self._to_variant(model.variant))

    # ==================== Helpers ====================

    def _insert_for_dialect(self):
        dialect = self.session.get_bind().dialect.name
        insert = _UPSERT_DIALECTS.get(dialect)
        if insert is None:
            raise NotImplementedError(f"Cart upsert is not supported on dialect '{dialect}'")
        return insert

    async def _touch_cart(self, cart_id: str) -> None:
        await self.session.execute(
            update(CartModel).where(CartModel.id == cart_id).values(updated_at=datetime.now(UTC))
        )

    async def _get_cart_model(self, condition, with_items: bool = False) -> CartModel | None:
        query = select(CartModel).where(condition)
        if with_items:
            query = query.options(selectinload(CartModel.items))
        result = await self.session.execute(query.execution_options(populate_existing=True))
        return result.scalar_one_or_none()

    async def _get_item_model(self, item_id: str) -> CartItemModel | None:
        result = await self.session.execute(
            select(CartItemModel)
            .options(selectinload(CartItemModel.variant).selectinload(ProductVariantModel.product))
            .where(CartItemModel.id == item_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    def _to_cart(self, model: CartModel) -> Cart:
        return Cart.create(
            id=model.id,
            user_id=model.user_id,
            session_id=model.session_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_item(self, model: CartItemModel) -> CartItem:
        return CartItem(
            id=model.id,
            cart_id=model.cart_id,
            variant_id=model.variant_id,
            quantity=model.quantity,
            price_at_add=to_decimal(model.price_at_add),
            created_at=model.created_at,
        )

    def _to_variant(self, model: ProductVariantModel) -> VariantSnapshot:
        return VariantSnapshot(
            id=model.id,
            stock_quantity=model.stock_quantity,
            price=to_decimal(model.price),
            sale_price=to_decimal(model.sale_price) if model.sale_price is not None else None,
            product_status=model.product.status if model.product is not None else "DRAFT",
        )
