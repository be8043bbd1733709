"""Mock catalog and accounts the storefront starts from."""

PRODUCTS: list[dict] = [
    {
        "id": "1",
        "name": "Wireless Noise-Cancelling Headphones",
        "description": "Over-ear headphones with active noise cancellation and 30-hour battery life.",
        "price": "249.99",
        "original_price": "299.99",
        "category": "electronics",
        "rating": "4.8",
        "review_count": 2341,
        "in_stock": True,
        "featured": True,
        "image": "headphones.jpg",
    },
    {
        "id": "2",
        "name": "Organic Cotton T-Shirt",
        "description": "Soft, breathable crew-neck tee made from 100% organic cotton.",
        "price": "29.99",
        "original_price": None,
        "category": "clothing",
        "rating": "4.5",
        "review_count": 856,
        "in_stock": True,
        "featured": False,
        "image": "tshirt.jpg",
    },
    {
        "id": "3",
        "name": "Smart Fitness Watch",
        "description": "Tracks heart rate, sleep and workouts with built-in GPS.",
        "price": "199.99",
        "original_price": "249.99",
        "category": "electronics",
        "rating": "4.6",
        "review_count": 1523,
        "in_stock": True,
        "featured": True,
        "image": "watch.jpg",
    },
    {
        "id": "4",
        "name": "Ceramic Pour-Over Coffee Set",
        "description": "Hand-glazed dripper, carafe and two mugs for slow morning coffee.",
        "price": "54.00",
        "original_price": None,
        "category": "home",
        "rating": "4.7",
        "review_count": 412,
        "in_stock": True,
        "featured": False,
        "image": "coffee-set.jpg",
    },
    {
        "id": "5",
        "name": "Yoga Mat Pro",
        "description": "Non-slip 6mm mat with alignment lines and a carrying strap.",
        "price": "45.99",
        "original_price": "59.99",
        "category": "sports",
        "rating": "4.4",
        "review_count": 978,
        "in_stock": False,
        "featured": True,
        "image": "yoga-mat.jpg",
    },
    {
        "id": "6",
        "name": "The Pragmatic Gardener",
        "description": "A practical guide to growing vegetables in small spaces.",
        "price": "18.50",
        "original_price": None,
        "category": "books",
        "rating": "4.2",
        "review_count": 133,
        "in_stock": True,
        "featured": False,
        "image": "gardener-book.jpg",
    },
    {
        "id": "7",
        "name": "Vitamin C Serum",
        "description": "Brightening face serum with 15% vitamin C and hyaluronic acid.",
        "price": "32.00",
        "original_price": "40.00",
        "category": "beauty",
        "rating": "4.3",
        "review_count": 690,
        "in_stock": True,
        "featured": False,
        "image": "serum.jpg",
    },
    {
        "id": "8",
        "name": "Leather Weekend Bag",
        "description": "Full-grain leather duffel with brass hardware and a padded strap.",
        "price": "189.00",
        "original_price": None,
        "category": "clothing",
        "rating": "4.9",
        "review_count": 204,
        "in_stock": True,
        "featured": True,
        "image": "weekend-bag.jpg",
    },
    {
        "id": "9",
        "name": "Portable Bluetooth Speaker",
        "description": "Waterproof speaker with 360-degree sound and 12-hour playback.",
        "price": "79.99",
        "original_price": "99.99",
        "category": "electronics",
        "rating": "4.5",
        "review_count": 1890,
        "in_stock": False,
        "featured": False,
        "image": "speaker.jpg",
    },
    {
        "id": "10",
        "name": "Linen Throw Blanket",
        "description": "Stonewashed linen throw that softens with every wash.",
        "price": "68.00",
        "original_price": None,
        "category": "home",
        "rating": "4.6",
        "review_count": 321,
        "in_stock": True,
        "featured": False,
        "image": "throw.jpg",
    },
    {
        "id": "11",
        "name": "Trail Running Shoes",
        "description": "Lightweight trail shoes with a grippy outsole and rock plate.",
        "price": "129.95",
        "original_price": None,
        "category": "sports",
        "rating": "4.7",
        "review_count": 745,
        "in_stock": True,
        "featured": True,
        "image": "trail-shoes.jpg",
    },
    {
        "id": "12",
        "name": "Mindful Cooking",
        "description": "Seasonal recipes and kitchen habits for calmer weeknight dinners.",
        "price": "24.99",
        "original_price": "29.99",
        "category": "books",
        "rating": "4.1",
        "review_count": 88,
        "in_stock": True,
        "featured": False,
        "image": "cooking-book.jpg",
    },
]

USERS: list[dict] = [
    {"id": "1", "name": "John Doe", "email": "john@example.com", "role": "user"},
    {"id": "2", "name": "Jane Smith", "email": "jane@example.com", "role": "user"},
    {"id": "3", "name": "Admin User", "email": "admin@example.com", "role": "admin"},
]
