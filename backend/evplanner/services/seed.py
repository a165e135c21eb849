"""
EVPlanner - Bootstrap Data
Sample users and EV charging products inserted into an empty catalog
"""
import logging
from typing import List

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from evplanner.models.product import Product
from evplanner.models.user import User

logger = logging.getLogger(__name__)

SAMPLE_USERS = [
    {"name": "John Doe", "email": "john@example.com"},
    {"name": "Jane Smith", "email": "jane@example.com"},
    {"name": "Bob Johnson", "email": "bob@example.com"},
]

# (name, manufacturer, origin, cost, rating, efficiency, lifetime, maintenance, footprint, nevi, documents, description)
_PRODUCT_ROWS = [
    ("ChargePoint CT4021", "ChargePoint", "USA", 8500, "4.5/5", 96, 15, 500,
     'Wall-mounted, 18" x 12" x 6"', True, ["Installation Manual", "Warranty", "NEVI Compliance Certificate"],
     "Level 2 commercial EV charger with smart connectivity and energy management features."),
    ("ChargePoint Express 250", "ChargePoint", "USA", 48000, "4.4/5", 94, 12, 1900,
     'Floor-standing, 34" x 22" x 75"', True, ["Installation Guide", "Technical Specifications", "NEVI Compliance"],
     "62.5 kW DC fast charger for retail and fleet sites, power-shareable in pairs."),
    ("ChargePoint CPF50", "ChargePoint", "USA", 3200, "4.3/5", 93, 10, 200,
     'Wall-mounted, 14" x 8" x 5"', False, ["User Manual", "Warranty"],
     "Fleet and multifamily Level 2 charger with cloud management."),
    ("BTC Power 50kW DC Fast Charger", "BTC Power", "USA", 45000, "4.2/5", 94, 12, 2000,
     'Floor-standing, 36" x 24" x 72"', True, ["Technical Specifications", "Installation Guide", "NEVI Documentation"],
     "High-power DC fast charger suitable for highway corridors and commercial applications."),
    ("BTC Power Gen4 180kW", "BTC Power", "USA", 98000, "4.5/5", 95, 15, 3200,
     'Floor-standing, 40" x 30" x 84"', True, ["Technical Manual", "Installation Guide", "NEVI Certification"],
     "Dual-port DC fast charger with dynamic power sharing for corridor sites."),
    ("ABB Terra 54 CJG", "ABB", "Finland", 52000, "4.6/5", 95, 15, 1800,
     'Floor-standing, 32" x 20" x 68"', True, ["User Manual", "Installation Manual", "Compliance Certificates"],
     "Reliable DC fast charger with dual CCS connectors and advanced payment systems."),
    ("ABB Terra 184", "ABB", "Italy", 88000, "4.6/5", 96, 15, 2800,
     'Floor-standing, 30" x 31" x 75"', True, ["Technical Data Sheet", "Installation Manual", "NEVI Compliance"],
     "180 kW all-in-one DC charger with dynamic power distribution."),
    ("ABB Terra AC Wallbox", "ABB", "Italy", 1800, "4.1/5", 92, 10, 150,
     'Wall-mounted, 13" x 8" x 4"', False, ["User Manual", "Installation Guide"],
     "Compact Level 2 wallbox for homes and small businesses."),
    ("Tesla Supercharger V3", "Tesla", "USA", 65000, "4.8/5", 97, 20, 1200,
     'Floor-standing, 30" x 18" x 80"', False, ["Technical Manual", "Installation Guide"],
     "High-speed DC charging with up to 250kW power delivery, optimized for Tesla vehicles."),
    ("Tesla Universal Wall Connector", "Tesla", "USA", 600, "4.7/5", 95, 10, 50,
     'Wall-mounted, 15" x 6" x 4"', False, ["Installation Manual", "Warranty"],
     "48 A Level 2 connector with an integrated J1772 adapter."),
    ("Electrify America 150kW", "Electrify America", "USA", 75000, "4.3/5", 93, 12, 2500,
     'Floor-standing, 38" x 26" x 78"', True, ["Installation Manual", "Maintenance Guide", "NEVI Compliance"],
     "Ultra-fast charging station supporting multiple connector types for broad vehicle compatibility."),
    ("EVgo 100kW DC Fast Charger", "EVgo", "USA", 58000, "4.1/5", 92, 10, 2200,
     'Floor-standing, 34" x 22" x 74"', True, ["Technical Specs", "Installation Guide", "Warranty Information"],
     "Fast charging solution designed for urban and suburban locations with reliable performance."),
    ("Blink HQ 200", "Blink Charging", "USA", 12000, "3.8/5", 89, 8, 800,
     'Pedestal-mounted, 24" x 16" x 60"', False, ["User Manual", "Installation Guide"],
     "Level 2 charging station suitable for workplace and multi-family residential applications."),
    ("Blink Series 7", "Blink Charging", "USA", 4500, "3.9/5", 90, 8, 350,
     'Pedestal-mounted, 20" x 14" x 58"', False, ["Installation Guide", "Network Setup Guide"],
     "Networked Level 2 charger with RFID and app-based payment."),
    ("Schneider Electric EVlink", "Schneider Electric", "France", 15500, "4.4/5", 94, 12, 600,
     'Wall-mounted, 20" x 14" x 8"', True, ["Installation Manual", "Technical Data", "Compliance Documentation"],
     "Smart EV charging solution with energy management and grid integration capabilities."),
    ("Schneider Electric EVlink Pro DC", "Schneider Electric", "France", 39000, "4.2/5", 94, 12, 1500,
     'Floor-standing, 30" x 20" x 70"', True, ["Technical Data", "Installation Manual", "NEVI Compliance"],
     "60 kW DC charger for depots and commercial parking."),
    ("Siemens VersiCharge", "Siemens", "Germany", 9800, "4.2/5", 91, 10, 450,
     'Wall-mounted, 16" x 10" x 5"', False, ["Installation Guide", "User Manual"],
     "Compact Level 2 charger designed for residential and light commercial use."),
    ("Siemens SICHARGE D", "Siemens", "Germany", 82000, "4.5/5", 96, 15, 2600,
     'Floor-standing, 39" x 24" x 80"', True, ["Technical Manual", "Installation Guide", "NEVI Certification"],
     "Scalable DC charger up to 300 kW with dynamic power sharing."),
    ("Webasto TurboDX", "Webasto", "Germany", 85000, "4.7/5", 96, 15, 3000,
     'Floor-standing, 40" x 28" x 82"', True, ["Technical Manual", "Installation Guide", "NEVI Certification"],
     "High-power DC charging solution with advanced cooling and reliable performance."),
    ("Webasto Unite", "Webasto", "Germany", 2400, "4.0/5", 91, 10, 180,
     'Wall-mounted, 16" x 9" x 5"', False, ["User Manual", "Installation Guide"],
     "Commercial Level 2 charger with OCPP connectivity."),
    ("EVBOX Troniq 100", "EVBox", "Netherlands", 62000, "4.3/5", 93, 12, 2100,
     'Floor-standing, 35" x 24" x 76"', True, ["Installation Manual", "Maintenance Guide", "Technical Specs"],
     "Fast charging station with modular design and comprehensive connectivity options."),
    ("EVBox BusinessLine", "EVBox", "Netherlands", 3800, "4.1/5", 92, 10, 250,
     'Wall-mounted, 19" x 12" x 6"', False, ["Installation Manual", "User Guide"],
     "Modular Level 2 charging for workplaces and parking operators."),
    ("Delta Electronics 25kW", "Delta Electronics", "Taiwan", 28000, "4.0/5", 90, 8, 1200,
     'Wall-mounted, 28" x 18" x 12"', False, ["User Guide", "Installation Manual"],
     "Mid-power DC charger suitable for fleet and commercial applications."),
    ("Delta Ultra Fast Charger 200kW", "Delta Electronics", "Taiwan", 92000, "4.4/5", 95, 15, 3100,
     'Floor-standing, 41" x 29" x 83"', True, ["Technical Data", "Installation Manual", "NEVI Compliance"],
     "Split-architecture ultra fast charger with up to 500 A output."),
    ("Wallbox Pulsar Plus", "Wallbox", "Spain", 7200, "4.5/5", 88, 7, 300,
     'Wall-mounted, 14" x 8" x 4"', False, ["Installation Guide", "User Manual", "Warranty"],
     "Smart home EV charger with WiFi connectivity and mobile app control."),
    ("Wallbox Supernova 180", "Wallbox", "Spain", 79000, "4.3/5", 95, 14, 2700,
     'Floor-standing, 37" x 25" x 79"', True, ["Technical Manual", "Installation Guide", "NEVI Compliance"],
     "Public DC fast charger assembled in the USA for NEVI corridors."),
    ("Tritium PK175", "Tritium", "Australia", 95000, "4.8/5", 98, 18, 3500,
     'Floor-standing, 42" x 30" x 84"', True, ["Technical Documentation", "Installation Manual", "NEVI Compliance"],
     "Ultra-high power charging system designed for highway corridors and high-utilization locations."),
    ("Tritium RTM75", "Tritium", "Australia", 51000, "4.5/5", 95, 15, 1700,
     'Floor-standing, 22" x 15" x 75"', True, ["Technical Documentation", "Installation Manual"],
     "Liquid-cooled 75 kW DC charger with a compact, IP65 sealed enclosure."),
    ("Kempower Satellite", "Kempower", "Finland", 42000, "4.4/5", 95, 13, 1800,
     'Floor-standing, 33" x 21" x 70"', True, ["Installation Guide", "Technical Manual", "Compliance Docs"],
     "Modular DC charging solution with flexible power distribution and scalable architecture."),
    ("Kempower Power Unit 600", "Kempower", "Finland", 120000, "4.6/5", 96, 15, 4000,
     'Cabinet, 48" x 32" x 86"', True, ["Technical Manual", "Installation Guide", "NEVI Certification"],
     "Central power cabinet feeding up to eight satellite dispensers."),
    ("SK Signet V2 350kW", "SK Signet", "South Korea", 135000, "4.5/5", 96, 15, 4200,
     'Floor-standing, 42" x 32" x 88"', True, ["Technical Specifications", "Installation Manual", "NEVI Compliance"],
     "Ultra-fast charger with liquid-cooled cables for heavy corridor traffic."),
    ("Alpitronic Hypercharger HYC300", "Alpitronic", "Italy", 110000, "4.7/5", 97, 15, 3600,
     'Floor-standing, 40" x 28" x 85"', True, ["Technical Manual", "Installation Guide", "NEVI Certification"],
     "300 kW high-power charger with dual-output dynamic sharing."),
    ("Enel X JuiceBox 40", "Enel X Way", "Italy", 700, "4.2/5", 94, 10, 60,
     'Wall-mounted, 13" x 8" x 4"', False, ["Installation Manual", "App Guide"],
     "Connected home Level 2 charger with load management."),
    ("FreeWire Boost Charger 200", "FreeWire", "USA", 140000, "4.3/5", 92, 12, 3800,
     'Floor-standing, 48" x 36" x 80"', True, ["Technical Specifications", "Battery Safety Data", "NEVI Compliance"],
     "Battery-integrated DC fast charger that avoids costly grid upgrades."),
    ("Heliox Flex 180kW", "Heliox", "Netherlands", 86000, "4.4/5", 95, 15, 2900,
     'Floor-standing, 38" x 27" x 80"', True, ["Technical Manual", "Installation Guide"],
     "Depot charger for electric bus and truck fleets."),
    ("Autel MaxiCharger DC Fast", "Autel", "China", 56000, "4.2/5", 94, 12, 1900,
     'Floor-standing, 33" x 22" x 74"', True, ["Installation Manual", "Technical Specs", "NEVI Compliance"],
     "Modular 120 kW DC charger with a large touchscreen interface."),
    ("Autel MaxiCharger AC Elite", "Autel", "China", 650, "4.4/5", 95, 10, 50,
     'Wall-mounted, 14" x 9" x 4"', False, ["User Manual", "Installation Guide"],
     "50 A home charger with Wi-Fi and Bluetooth connectivity."),
    ("Zerova DS 180kW", "Zerova", "Taiwan", 80000, "4.2/5", 95, 14, 2700,
     'Floor-standing, 39" x 27" x 81"', True, ["Technical Data", "Installation Manual", "NEVI Compliance"],
     "High-power dual-dispenser DC charger built for public networks."),
    ("Nuvve RES-HD60", "Nuvve", "USA", 46000, "4.0/5", 93, 12, 1600,
     'Floor-standing, 32" x 22" x 72"', False, ["Technical Specifications", "V2G Integration Guide"],
     "Bidirectional DC charger for vehicle-to-grid school bus fleets."),
    ("LG 350kW DC Fast Charger", "LG Business Solutions", "USA", 125000, "4.3/5", 95, 15, 4100,
     'Floor-standing, 41" x 31" x 86"', True, ["Technical Manual", "Installation Guide", "NEVI Certification"],
     "Ultra-fast charger manufactured in Texas for highway deployments."),
]

SAMPLE_PRODUCTS: List[dict] = [
    {
        "category": "EV Charger",
        "name": name,
        "manufacturer": manufacturer,
        "origin": origin,
        "cost": float(cost),
        "currency": "USD",
        "rating": rating,
        "efficiency": float(efficiency),
        "lifetime": lifetime,
        "maintenance_cost": float(maintenance),
        "footprint": footprint,
        "nevi_eligible": nevi,
        "documents": documents,
        "description": description,
    }
    for (name, manufacturer, origin, cost, rating, efficiency, lifetime,
         maintenance, footprint, nevi, documents, description) in _PRODUCT_ROWS
]


async def seed_database(db: AsyncSession) -> int:
    """
    Insert the sample catalog when the product table is empty.

    Users are skipped when their email exists; products are skipped when
    the (name, manufacturer) pair exists. Returns the number of products
    inserted.
    """
    product_count = await db.scalar(select(func.count()).select_from(Product))
    if product_count:
        logger.info("Database already has data, skipping seed")
        return 0

    logger.info("🌱 Seeding database with initial data...")

    result = await db.execute(select(User.email))
    existing_emails = {row[0] for row in result.fetchall()}
    for user in SAMPLE_USERS:
        if user["email"] not in existing_emails:
            db.add(User(**user))
            existing_emails.add(user["email"])

    result = await db.execute(select(Product.name, Product.manufacturer))
    existing_pairs = {(row[0], row[1]) for row in result.fetchall()}

    inserted = 0
    for product in SAMPLE_PRODUCTS:
        key = (product["name"], product["manufacturer"])
        if key in existing_pairs:
            continue
        db.add(Product(**product))
        existing_pairs.add(key)
        inserted += 1

    await db.commit()
    logger.info(f"✅ Seeded {inserted} products")
    return inserted
