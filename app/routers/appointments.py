# routers/appointments.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.core.security import get_current_user
from app.db.session import get_db
from app.models.appointment import Appointment, Clinic
from app.models.user import User
from app.schemas.appointment import AppointmentIn, AppointmentOut, AppointmentStatusIn, ClinicOut

logger = logging.getLogger(__name__)
router = APIRouter(tags=["appointments"])


@router.get("/api/clinics", response_model=List[ClinicOut])
def list_clinics(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return db.query(Clinic).order_by(Clinic.id.asc()).all()


@router.get("/api/appointments", response_model=List[AppointmentOut])
def list_appointments(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return (
        db.query(Appointment)
        .filter(Appointment.user_id == user.id)
        .order_by(Appointment.appointment_date.desc())
        .all()
    )


@router.post("/api/appointments", response_model=AppointmentOut)
def create_appointment(
    body: AppointmentIn,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    if body.clinic_id is not None and db.get(Clinic, body.clinic_id) is None:
        raise HTTPException(status_code=404, detail="Clinic not found")

    appointment = Appointment(user_id=user.id, status="scheduled", **body.model_dump())
    db.add(appointment)
    db.commit()
    db.refresh(appointment)
    logger.info(f"📅 Appointment booked: id={appointment.id}, user={user.id}, type={appointment.type}")
    return appointment


@router.patch("/api/appointments/{appointment_id}/status", response_model=AppointmentOut)
def update_appointment_status(
    appointment_id: int,
    body: AppointmentStatusIn,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    appointment = (
        db.query(Appointment)
        .filter(Appointment.id == appointment_id, Appointment.user_id == user.id)
        .first()
    )
    if not appointment:
        raise HTTPException(status_code=404, detail="Appointment not found")

    appointment.status = body.status
    db.add(appointment)
    db.commit()
    db.refresh(appointment)
    return appointment
