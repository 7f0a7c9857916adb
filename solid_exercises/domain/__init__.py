"""Domain layer - entities and capability interfaces.

This layer contains:
- Domain entities (Product, Order)
- Media player interfaces (Interface Segregation)
- Reader/writer interfaces (Dependency Inversion)
- Order system interfaces (Single Responsibility, Open/Closed)
"""
