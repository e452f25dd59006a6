"""E-commerce / food-delivery management backend."""
