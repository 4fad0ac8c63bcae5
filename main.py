import logging
import math
import os
import re
from datetime import datetime, timedelta, timezone
from typing import Optional, List, Any, Dict

from fastapi import FastAPI, HTTPException, Depends, Query, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.security import OAuth2PasswordBearer
from pydantic import BaseModel, Field, EmailStr, field_validator
from jose import jwt, JWTError
from passlib.context import CryptContext
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException
from bson import ObjectId
from bson.errors import InvalidId

from database import db, create_document
from schemas import (
    User as UserSchema,
    Product as ProductSchema,
    Order as OrderSchema,
    CartItem,
    OrderItem,
    ShippingAddress,
    PaymentMethod,
    OrderStatus,
)
from seed_data import SAMPLE_PRODUCTS

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - [%(levelname)s] - %(message)s",
)
logger = logging.getLogger("shopkart")

# Config
SECRET_KEY = os.getenv("SECRET_KEY", "supersecretkey")
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 7 * 24 * 60))
ADMIN_EMAIL = os.getenv("ADMIN_EMAIL")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD")

DEFAULT_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5500",
    "http://127.0.0.1:5500",
]


def allowed_origins() -> List[str]:
    extra = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]
    return list(dict.fromkeys(DEFAULT_ORIGINS + extra))


# App and CORS
app = FastAPI(title="ShopKart API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login")


# Error envelopes
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=422,
        content={"success": False, "message": "Validation failed", "errors": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"success": False, "message": "Server Error"})


# Helpers

def collection(name: str):
    if db is None:
        raise HTTPException(status_code=503, detail="Database not available")
    return db[name]


def to_obj_id(id_str: str) -> ObjectId:
    try:
        return ObjectId(id_str)
    except (InvalidId, TypeError):
        raise HTTPException(status_code=400, detail="Invalid id")


def sanitize(doc: Dict) -> Dict:
    if not doc:
        return doc
    d = {**doc}
    if "_id" in d:
        d["id"] = str(d.pop("_id"))
    return d


def public_user(doc: Dict) -> Dict:
    """Strip credentials and the embedded cart from a user document."""
    d = sanitize(doc)
    d.pop("password_hash", None)
    d.pop("cart", None)
    return d


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    if not hashed:
        return False
    return pwd_context.verify(password, hashed)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None):
    to_encode = data.copy()
    expire = now_utc() + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


async def get_current_user(token: str = Depends(oauth2_scheme)):
    credentials_exception = HTTPException(
        status_code=401,
        detail="Not authorized, token failed",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
        user_id: str = payload.get("sub")
        if user_id is None:
            raise credentials_exception
    except JWTError:
        raise credentials_exception
    try:
        oid = ObjectId(user_id)
    except (InvalidId, TypeError):
        raise credentials_exception
    user = collection("user").find_one({"_id": oid})
    if not user:
        raise credentials_exception
    return user


def require_role(*roles: str):
    async def role_dep(current_user=Depends(get_current_user)):
        if current_user.get("role") not in roles:
            raise HTTPException(status_code=403, detail="Insufficient permissions")
        return current_user
    return role_dep


def get_product_or_404(product_id: str) -> Dict:
    product = collection("product").find_one({"_id": to_obj_id(product_id)})
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


def load_cart(user: Dict):
    """Return the user's cart lines and their products keyed by id.

    Lines whose product was deleted are pruned from the stored cart.
    """
    lines = user.get("cart", [])
    ids = [ObjectId(line["product_id"]) for line in lines]
    products = {str(p["_id"]): p for p in collection("product").find({"_id": {"$in": ids}})} if ids else {}
    live = [line for line in lines if line["product_id"] in products]
    if len(live) != len(lines):
        logger.info("Pruned %d unavailable items from cart of %s", len(lines) - len(live), user["_id"])
        save_cart(user, live)
    return live, products


def populate_cart(user: Dict) -> Dict[str, Any]:
    """Join cart lines with their current products."""
    lines, products = load_cart(user)
    items = [
        {"product": sanitize(products[line["product_id"]]), "quantity": line["quantity"], "price": line["price"]}
        for line in lines
    ]
    subtotal = round(sum(i["price"] * i["quantity"] for i in items), 2)
    return {"success": True, "cart": items, "subtotal": subtotal}


def save_cart(user: Dict, lines: List[Dict]) -> None:
    collection("user").update_one({"_id": user["_id"]}, {"$set": {"cart": lines, "updated_at": now_utc()}})
    user["cart"] = lines


def present_order(order: Dict) -> Dict:
    d = sanitize(order)
    owner = None
    if ObjectId.is_valid(d.get("user_id", "")):
        owner = collection("user").find_one({"_id": ObjectId(d["user_id"])}, {"name": 1, "email": 1})
    d["user"] = {"id": d.get("user_id"), "name": owner.get("name"), "email": owner.get("email")} if owner else None
    return d


def reserve_stock(items: List[Dict]) -> None:
    """Decrement stock for each line, only while enough units remain.

    On the first line that cannot be covered, the lines already decremented
    are put back and a 400 is raised.
    """
    products = collection("product")
    reserved: List[Dict] = []
    for item in items:
        result = products.update_one(
            {"_id": ObjectId(item["product_id"]), "stock": {"$gte": item["quantity"]}},
            {"$inc": {"stock": -item["quantity"]}, "$set": {"updated_at": now_utc()}},
        )
        if result.modified_count == 0:
            logger.warning("Stock reservation failed for product %s (qty %s)", item["product_id"], item["quantity"])
            release_stock(reserved)
            raise HTTPException(status_code=400, detail=f"Insufficient stock for {item['name']}")
        reserved.append(item)


def release_stock(items: List[Dict]) -> None:
    products = collection("product")
    for item in items:
        products.update_one(
            {"_id": ObjectId(item["product_id"])},
            {"$inc": {"stock": item["quantity"]}, "$set": {"updated_at": now_utc()}},
        )


# Request/Response Models
class RegisterRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=6)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name is required")
        return v


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class TokenResponse(BaseModel):
    success: bool = True
    access_token: str
    token_type: str = "bearer"
    user: Dict[str, Any]


class ProductUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=2000)
    price: Optional[float] = Field(None, ge=0)
    image: Optional[str] = None
    category: Optional[str] = Field(None, min_length=1)
    stock: Optional[int] = Field(None, ge=0)
    rating: Optional[float] = Field(None, ge=0, le=5)
    num_reviews: Optional[int] = Field(None, ge=0)

    # only image may be cleared with an explicit null
    @field_validator("name", "description", "price", "category", "stock", "rating", "num_reviews")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("Field cannot be null")
        return v


class AddToCartRequest(BaseModel):
    product_id: str
    quantity: int = Field(1, ge=1)


class UpdateCartRequest(BaseModel):
    quantity: int = Field(..., ge=1)


class CreateOrderRequest(BaseModel):
    shipping_address: ShippingAddress = Field(default_factory=ShippingAddress)
    payment_method: PaymentMethod = "cash_on_delivery"
    notes: str = Field("", max_length=500)


class UpdateOrderStatusRequest(BaseModel):
    status: OrderStatus


# Startup
@app.on_event("startup")
def seed_admin():
    if db is None or not (ADMIN_EMAIL and ADMIN_PASSWORD):
        return
    email = ADMIN_EMAIL.lower()
    if db["user"].find_one({"email": email}):
        db["user"].update_one({"email": email}, {"$set": {"role": "admin", "updated_at": now_utc()}})
        logger.info("Promoted %s to admin", email)
        return
    user_doc = UserSchema(
        name="Administrator",
        email=email,
        password_hash=hash_password(ADMIN_PASSWORD),
        role="admin",
    ).model_dump()
    create_document("user", user_doc)
    logger.info("Created admin account %s", email)


# Utility endpoints
@app.get("/")
def root():
    return {"message": "ShopKart API running"}


@app.get("/api/health")
def health():
    if db is None:
        database = "unavailable"
    else:
        try:
            db.list_collection_names()
            database = "connected"
        except PyMongoError as e:
            logger.warning("Health check could not reach MongoDB: %s", e)
            database = f"error: {str(e)[:50]}"
    return {"success": True, "message": "API is running", "database": database}


# Auth Routes
@app.post("/api/auth/register", response_model=TokenResponse, status_code=201)
def register(payload: RegisterRequest):
    users = collection("user")
    email = payload.email.lower()
    if users.find_one({"email": email}):
        raise HTTPException(status_code=400, detail="User already exists")
    user_doc = UserSchema(
        name=payload.name,
        email=email,
        password_hash=hash_password(payload.password),
        role="user",
    ).model_dump()
    uid = create_document("user", user_doc)
    user_doc["_id"] = ObjectId(uid)
    logger.info("Registered user %s", uid)
    token = create_access_token({"sub": uid})
    return TokenResponse(access_token=token, user=public_user(user_doc))


@app.post("/api/auth/login", response_model=TokenResponse)
def login(payload: LoginRequest):
    user = collection("user").find_one({"email": payload.email.lower()})
    if not user or not verify_password(payload.password, user.get("password_hash", "")):
        logger.warning("Failed login for %s", payload.email)
        raise HTTPException(status_code=401, detail="Invalid email or password")
    token = create_access_token({"sub": str(user["_id"])})
    return TokenResponse(access_token=token, user=public_user(user))


@app.get("/api/auth/me")
def me(current_user=Depends(get_current_user)):
    return {"success": True, "user": public_user(current_user)}


# Product Routes
SORT_OPTIONS = {
    "price-asc": [("price", 1)],
    "price-desc": [("price", -1)],
    "name-asc": [("name", 1)],
    "name-desc": [("name", -1)],
    "rating": [("rating", -1)],
}


@app.get("/api/products")
def list_products(
    category: Optional[str] = None,
    search: Optional[str] = None,
    min_price: Optional[float] = Query(None, ge=0),
    max_price: Optional[float] = Query(None, ge=0),
    sort: Optional[str] = None,
    page: int = Query(1, ge=1),
    limit: int = Query(12, ge=1, le=100),
):
    q: Dict[str, Any] = {}
    if category and category != "All":
        q["category"] = category
    if search:
        pattern = re.escape(search)
        q["$or"] = [
            {"name": {"$regex": pattern, "$options": "i"}},
            {"description": {"$regex": pattern, "$options": "i"}},
        ]
    if min_price is not None or max_price is not None:
        q["price"] = {}
        if min_price is not None:
            q["price"]["$gte"] = min_price
        if max_price is not None:
            q["price"]["$lte"] = max_price
    sort_spec = SORT_OPTIONS.get(sort, [("created_at", -1)])

    products = collection("product")
    cursor = products.find(q).sort(sort_spec).skip((page - 1) * limit).limit(limit)
    items = [sanitize(p) for p in cursor]
    total = products.count_documents(q)
    return {
        "success": True,
        "count": len(items),
        "total": total,
        "total_pages": math.ceil(total / limit),
        "current_page": page,
        "products": items,
    }


@app.get("/api/products/categories")
def list_categories():
    categories = sorted(c for c in collection("product").distinct("category") if c)
    return {"success": True, "categories": ["All", *categories]}


@app.get("/api/products/featured")
def featured_products():
    cursor = collection("product").find({"rating": {"$gte": 4}}).sort([("rating", -1), ("num_reviews", -1)]).limit(8)
    return {"success": True, "products": [sanitize(p) for p in cursor]}


@app.post("/api/products/seed", status_code=201)
def seed_products(admin=Depends(require_role("admin"))):
    products = collection("product")
    products.delete_many({})
    now = now_utc()
    docs = [{**ProductSchema(**p).model_dump(), "created_at": now, "updated_at": now} for p in SAMPLE_PRODUCTS]
    res = products.insert_many(docs)
    count = len(res.inserted_ids)
    logger.info("Seeded %d products", count)
    return {"success": True, "message": f"Successfully seeded {count} products", "count": count}


@app.get("/api/products/{product_id}")
def get_product(product_id: str):
    return {"success": True, "product": sanitize(get_product_or_404(product_id))}


@app.post("/api/products", status_code=201)
def create_product(payload: ProductSchema, admin=Depends(require_role("admin"))):
    pid = create_document("product", payload)
    return {"success": True, "product": sanitize(get_product_or_404(pid))}


@app.put("/api/products/{product_id}")
def update_product(product_id: str, payload: ProductUpdate, admin=Depends(require_role("admin"))):
    product = get_product_or_404(product_id)
    changes = payload.model_dump(exclude_unset=True)
    if changes:
        changes["updated_at"] = now_utc()
        collection("product").update_one({"_id": product["_id"]}, {"$set": changes})
        product.update(changes)
    return {"success": True, "product": sanitize(product)}


@app.delete("/api/products/{product_id}")
def delete_product(product_id: str, admin=Depends(require_role("admin"))):
    product = get_product_or_404(product_id)
    collection("product").delete_one({"_id": product["_id"]})
    return {"success": True, "message": "Product deleted successfully"}


# Cart Routes
@app.get("/api/cart")
def get_cart(current_user=Depends(get_current_user)):
    return populate_cart(current_user)


@app.post("/api/cart")
def add_to_cart(payload: AddToCartRequest, current_user=Depends(get_current_user)):
    product = get_product_or_404(payload.product_id)
    stock = int(product.get("stock", 0))
    if stock < payload.quantity:
        raise HTTPException(status_code=400, detail=f"Only {stock} items available in stock")

    pid = str(product["_id"])
    lines = [dict(line) for line in current_user.get("cart", [])]
    existing = next((line for line in lines if line["product_id"] == pid), None)
    if existing:
        new_quantity = existing["quantity"] + payload.quantity
        if new_quantity > stock:
            raise HTTPException(status_code=400, detail=f"Cannot add more. Only {stock} items available")
        existing["quantity"] = new_quantity
    else:
        lines.append(CartItem(product_id=pid, quantity=payload.quantity, price=float(product["price"])).model_dump())
    save_cart(current_user, lines)
    return populate_cart(current_user)


@app.put("/api/cart/{product_id}")
def update_cart_item(product_id: str, payload: UpdateCartRequest, current_user=Depends(get_current_user)):
    lines = [dict(line) for line in current_user.get("cart", [])]
    line = next((line for line in lines if line["product_id"] == product_id), None)
    if line is None:
        raise HTTPException(status_code=404, detail="Item not found in cart")
    product = get_product_or_404(product_id)
    stock = int(product.get("stock", 0))
    if payload.quantity > stock:
        raise HTTPException(status_code=400, detail=f"Only {stock} items available in stock")
    line["quantity"] = payload.quantity
    save_cart(current_user, lines)
    return populate_cart(current_user)


@app.delete("/api/cart/{product_id}")
def remove_from_cart(product_id: str, current_user=Depends(get_current_user)):
    lines = [line for line in current_user.get("cart", []) if line["product_id"] != product_id]
    save_cart(current_user, lines)
    return populate_cart(current_user)


@app.delete("/api/cart")
def clear_cart(current_user=Depends(get_current_user)):
    save_cart(current_user, [])
    return {"success": True, "message": "Cart cleared successfully", "cart": []}


# Order Routes
@app.post("/api/orders", status_code=201)
def create_order(payload: CreateOrderRequest, current_user=Depends(get_current_user)):
    lines, products = load_cart(current_user)
    if not lines:
        raise HTTPException(status_code=400, detail="Cart is empty")

    items: List[Dict] = []
    for line in lines:
        product = products[line["product_id"]]
        stock = int(product.get("stock", 0))
        if stock < line["quantity"]:
            raise HTTPException(
                status_code=400,
                detail=f"Insufficient stock for {product['name']}. Available: {stock}",
            )
        items.append(OrderItem(
            product_id=line["product_id"],
            name=product["name"],
            price=line["price"],
            quantity=line["quantity"],
        ).model_dump())

    total_amount = round(sum(i["price"] * i["quantity"] for i in items), 2)
    order_doc = OrderSchema(
        user_id=str(current_user["_id"]),
        items=items,
        shipping_address=payload.shipping_address,
        payment_method=payload.payment_method,
        total_amount=total_amount,
        notes=payload.notes,
    ).model_dump()

    reserve_stock(items)
    try:
        order_id = create_document("order", order_doc)
    except PyMongoError:
        logger.exception("Order insert failed, restoring stock")
        release_stock(items)
        raise

    save_cart(current_user, [])
    logger.info("Order %s placed by %s for %.2f", order_id, current_user["_id"], total_amount)
    order = collection("order").find_one({"_id": ObjectId(order_id)})
    return {"success": True, "message": "Order placed successfully!", "order": present_order(order)}


@app.get("/api/orders")
def list_orders(current_user=Depends(get_current_user)):
    cursor = collection("order").find({"user_id": str(current_user["_id"])}).sort([("created_at", -1)])
    orders = [present_order(o) for o in cursor]
    return {"success": True, "count": len(orders), "orders": orders}


def get_order_for(order_id: str, current_user: Dict, action: str) -> Dict:
    order = collection("order").find_one({"_id": to_obj_id(order_id)})
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    if order.get("user_id") != str(current_user["_id"]) and current_user.get("role") != "admin":
        raise HTTPException(status_code=403, detail=f"Not authorized to {action} this order")
    return order


@app.get("/api/orders/{order_id}")
def get_order(order_id: str, current_user=Depends(get_current_user)):
    order = get_order_for(order_id, current_user, "view")
    return {"success": True, "order": present_order(order)}


@app.put("/api/orders/{order_id}/status")
def update_order_status(order_id: str, payload: UpdateOrderStatusRequest, current_user=Depends(get_current_user)):
    order = get_order_for(order_id, current_user, "update")
    if payload.status != "cancelled" and current_user.get("role") != "admin":
        raise HTTPException(status_code=403, detail="Only administrators can change order status")
    if order.get("status") == "cancelled":
        raise HTTPException(status_code=400, detail="Order is already cancelled")
    if payload.status == "cancelled" and order.get("status") != "pending":
        raise HTTPException(status_code=400, detail="Can only cancel pending orders")

    changes = {"status": payload.status, "updated_at": now_utc()}
    # only the pending -> cancelled transition may restore stock
    res = collection("order").update_one({"_id": order["_id"], "status": order.get("status")}, {"$set": changes})
    if res.modified_count == 0:
        raise HTTPException(status_code=409, detail="Order was modified concurrently, please retry")
    if payload.status == "cancelled":
        release_stock(order.get("items", []))
        logger.info("Order %s cancelled, stock restored for %d items", order["_id"], len(order.get("items", [])))
    order.update(changes)
    return {"success": True, "message": "Order status updated", "order": present_order(order)}


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 8000))
    uvicorn.run(app, host="0.0.0.0", port=port)
