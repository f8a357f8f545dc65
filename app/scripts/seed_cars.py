"""
Script to seed sample cars into the database.
"""
from app.db.session import SessionLocal, init_db
from app.db.models import Car, CarStatus, FuelType, TransmissionType, VehicleSize
from app.core.config import settings


def seed_cars():
    init_db()
    db = SessionLocal()
    try:
        # Check if table is empty
        cars_count = db.query(Car).count()
        if cars_count > 0:
            print(f"Database already has {cars_count} cars. Skipping seeding.")
            return

        print("Seeding sample cars...")
        sample_cars = [
            Car(
                make="Toyota",
                car_model="Corolla",
                year="2022",
                status=CarStatus.AVAILABLE,
                daily_rate=45.0,
                description="Compact sedan, economical for city driving",
                fuel_type=FuelType.HYBRID,
                transmission=TransmissionType.AUTOMATIC,
                mileage="18000",
                vehicle_size=VehicleSize.MEDIUM
            ),
            Car(
                make="Volkswagen",
                car_model="Polo",
                year="2021",
                status=CarStatus.AVAILABLE,
                daily_rate=35.0,
                description="Small hatchback with low running costs",
                fuel_type=FuelType.PETROL,
                transmission=TransmissionType.MANUAL,
                mileage="32000",
                vehicle_size=VehicleSize.SMALL
            ),
            Car(
                make="Tesla",
                car_model="Model Y",
                year="2023",
                status=CarStatus.AVAILABLE,
                daily_rate=110.0,
                description="Electric SUV with long range battery",
                fuel_type=FuelType.ELECTRIC,
                transmission=TransmissionType.AUTOMATIC,
                mileage="9000",
                vehicle_size=VehicleSize.LARGE
            )
        ]
        db.add_all(sample_cars)
        db.commit()
        print(f"Successfully seeded {len(sample_cars)} sample cars.")
    except Exception as e:
        db.rollback()
        print(f"Error during seeding: {str(e)}")
    finally:
        db.close()


if __name__ == "__main__":
    print(f"Target Database: {settings.DATABASE_URL}")
    seed_cars()
