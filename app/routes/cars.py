"""
Car inventory routes
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status, UploadFile, File, Form
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.db.models import CarStatus, FuelType, TransmissionType, VehicleSize
from app.schemas.car import CarCreate, CarUpdate, CarResponse, CarMessageResponse
from app.services.car_service import car_service
from app.routes.dependencies import require_admin

router = APIRouter(
    prefix="/api/cars",
    tags=["cars"]
)


@router.get("", response_model=List[CarResponse])
async def list_cars(db: Session = Depends(get_db)):
    """Get all cars"""
    return car_service.get_cars(db)


@router.post("", response_model=CarMessageResponse, status_code=status.HTTP_201_CREATED)
async def create_car(
    make: str = Form(...),
    car_model: str = Form(...),
    year: str = Form(...),
    description: str = Form(...),
    daily_rate: float = Form(...),
    transmission: TransmissionType = Form(...),
    mileage: str = Form(...),
    vehicle_size: VehicleSize = Form(...),
    car_status: CarStatus = Form(CarStatus.AVAILABLE, alias="status"),
    fuel_type: FuelType = Form(FuelType.DIESEL),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    current_user: dict = Depends(require_admin)
):
    """Create a new car with an optional image (admin only)"""
    car_data = CarCreate(
        make=make,
        car_model=car_model,
        year=year,
        description=description,
        daily_rate=daily_rate,
        status=car_status,
        fuel_type=fuel_type,
        transmission=transmission,
        mileage=mileage,
        vehicle_size=vehicle_size
    )
    car = await car_service.create_car(db, car_data, image)
    return {"message": "Car created successfully", "car": car}


@router.get("/similar/{car_id}", response_model=List[CarResponse])
async def get_similar_cars(car_id: int, db: Session = Depends(get_db)):
    """Get up to five cars similar in size or price"""
    car = car_service.get_car(db, car_id)
    if not car:
        raise HTTPException(status_code=404, detail="Car not found")
    return car_service.get_similar_cars(db, car)


@router.get("/makes", response_model=List[str])
async def get_makes(db: Session = Depends(get_db)):
    """Get distinct car makes"""
    return car_service.get_makes(db)


@router.get("/search", response_model=List[CarResponse])
async def search_cars(query: Optional[str] = None, db: Session = Depends(get_db)):
    """Search cars by make or model"""
    if not query:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Search query is required"
        )
    return car_service.search_cars(db, query)


@router.get("/filter", response_model=List[CarResponse])
async def filter_cars(
    make: Optional[str] = None,
    price_min: Optional[float] = None,
    price_max: Optional[float] = None,
    db: Session = Depends(get_db)
):
    """Filter cars by make and daily rate"""
    return car_service.filter_cars(db, make=make, price_min=price_min, price_max=price_max)


@router.get("/{car_id}", response_model=CarResponse)
async def get_car(car_id: int, db: Session = Depends(get_db)):
    """Get car by ID"""
    car = car_service.get_car(db, car_id)
    if not car:
        raise HTTPException(status_code=404, detail="Car not found")
    return car


@router.put("/{car_id}", response_model=CarMessageResponse)
def update_car(
    car_id: int,
    car_data: CarUpdate,
    db: Session = Depends(get_db),
    current_user: dict = Depends(require_admin)
):
    """Update a car (admin only)"""
    car = car_service.update_car(db, car_id, car_data)
    if not car:
        raise HTTPException(status_code=404, detail="Car not found")
    return {"message": "Car updated successfully", "car": car}


@router.delete("/{car_id}")
def delete_car(
    car_id: int,
    db: Session = Depends(get_db),
    current_user: dict = Depends(require_admin)
):
    """Delete a car (admin only)"""
    if not car_service.delete_car(db, car_id):
        raise HTTPException(status_code=404, detail="Car not found")
    return {"message": "Car deleted successfully"}
