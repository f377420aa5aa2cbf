from fastapi import Depends
from sqlalchemy.orm import Session

from pos.database import get_db
from pos.models.category import Category
from pos.models.customer import Customer
from pos.models.product import Product
from pos.models.purchase import Purchase
from pos.models.setting import Setting
from pos.models.transaction import Transaction
from pos.models.user import User
from pos.services.category_service import CategoryService
from pos.services.customer_service import CustomerService
from pos.services.product_service import ProductService
from pos.services.purchase_service import PurchaseService
from pos.services.record_store import RecordStore
from pos.services.settings_service import SettingsService
from pos.services.stock_ledger import StockLedger
from pos.services.transaction_service import TransactionService
from pos.services.user_service import UserService


# Services are built per request around the request's session


def get_stock_ledger(db: Session = Depends(get_db)) -> StockLedger:
    return StockLedger(RecordStore(db, Product))


def get_purchase_service(
    db: Session = Depends(get_db),
    ledger: StockLedger = Depends(get_stock_ledger),
) -> PurchaseService:
    return PurchaseService(RecordStore(db, Purchase), ledger)


def get_product_service(
    db: Session = Depends(get_db),
    ledger: StockLedger = Depends(get_stock_ledger),
) -> ProductService:
    return ProductService(RecordStore(db, Product), RecordStore(db, Category), ledger)


def get_category_service(db: Session = Depends(get_db)) -> CategoryService:
    return CategoryService(RecordStore(db, Category))


def get_customer_service(db: Session = Depends(get_db)) -> CustomerService:
    return CustomerService(RecordStore(db, Customer))


def get_settings_service(db: Session = Depends(get_db)) -> SettingsService:
    return SettingsService(RecordStore(db, Setting))


def get_transaction_service(db: Session = Depends(get_db)) -> TransactionService:
    return TransactionService(RecordStore(db, Transaction))


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(RecordStore(db, User))
