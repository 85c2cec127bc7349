"""Domain layer: device model, store contract, validation rules and errors."""
