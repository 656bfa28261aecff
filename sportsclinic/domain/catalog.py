from loguru import logger

from sportsclinic.domain.models import (
    BodyPart,
    Doctor,
    DoctorRecord,
    Injury,
    Sport,
    Treatment,
)

DEFAULT_SPECIALTY = "Sports Medicine"

FALLBACK_TREATMENT = "No specific treatment found. Consult a healthcare provider for proper care."


def _injury(injury_type: str, body_part: BodyPart, movable: bool, description: str) -> Injury:
    return Injury(
        injury_type=injury_type,
        body_part=body_part,
        movable=movable,
        athlete_description=description,
    )


# Ordered; selection menus and filters preserve this order.
_INJURIES: tuple[Injury, ...] = (
    _injury("Quadriceps Contusion", BodyPart.THIGH, True, "Deep bruise from direct impact. Can walk but with pain."),
    _injury("Hamstring Strain Grade 2", BodyPart.HAMSTRING, True, "Partial muscle tear. Pain when bending knee or stretching."),
    _injury("Achilles Tendinitis", BodyPart.ACHILLES, True, "Morning stiffness and pain along the back of heel."),
    _injury("Calf Muscle Pull", BodyPart.CALF, True, "Sudden sharp pain during push-off. Can't run properly."),
    _injury("High Ankle Sprain", BodyPart.ANKLE, False, "Pain above ankle, between tibia and fibula. Very unstable."),
    _injury("Ankle Fracture", BodyPart.ANKLE, False, "Broken bone in ankle. Can't bear any weight at all."),
    _injury("ACL Tear", BodyPart.KNEE, False, "Knee gave out with popping sound. Immediate swelling."),
    _injury("Meniscus Tear", BodyPart.KNEE, True, "Locking/catching sensation. Pain when twisting knee."),
    _injury("Plantar Fasciitis", BodyPart.FOOT, True, "Heel pain especially first steps in morning."),
    _injury("Metatarsal Stress Fracture", BodyPart.FOOT, False, "Pain in middle of foot. Worse with activity."),
    _injury("Compartment Syndrome", BodyPart.SHIN, False, "Intense pressure and pain. Numbness in foot."),
    _injury("Tibial Stress Reaction", BodyPart.SHIN, True, "Pain along shin bone that worsens with exercise."),
    _injury("Tennis Elbow", BodyPart.ELBOW, True, "Pain on outside of elbow when gripping or lifting."),
    _injury("Golfer's Elbow", BodyPart.ELBOW, True, "Pain on inside of elbow, worse with wrist flexion."),
    _injury("Rotator Cuff Tear", BodyPart.SHOULDER, True, "Pain when lifting arm overhead. Weakness."),
    _injury("Frozen Shoulder", BodyPart.SHOULDER, False, "Stiffness and pain. Gradually losing range of motion."),
    _injury("Wrist Sprain", BodyPart.WRIST, True, "Pain with movement, especially bending backward."),
    _injury("Carpal Tunnel Syndrome", BodyPart.WRIST, True, "Numbness/tingling in fingers, especially at night."),
    _injury("Femur Fracture", BodyPart.LEG, False, "Severe thigh pain. Leg appears deformed."),
    _injury("IT Band Syndrome", BodyPart.LEG, True, "Pain on outside of knee/hip. Worse with running."),
    _injury("Biceps Tendinitis", BodyPart.ARM, True, "Pain in front of shoulder when lifting."),
    _injury("Triceps Strain", BodyPart.ARM, True, "Pain in back of upper arm when extending elbow."),
    _injury("AC Joint Separation", BodyPart.SHOULDER, False, "Bump on top of shoulder. Pain with arm movement."),
    _injury("Patellar Tendinitis", BodyPart.KNEE, True, "Pain below kneecap, especially when jumping."),
    _injury("Achilles Rupture", BodyPart.ACHILLES, False, "Sudden pop in calf. Can't push off foot."),
    _injury("Anterior Ankle Impingement", BodyPart.ANKLE, True, "Pain in front of ankle when pointing toes up."),
)

_TREATMENTS: dict[str, str] = {
    "Quadriceps Contusion":
        "Rest from impact activities, apply ice for 15–20 minutes every 2–3 hours, gently stretch as tolerated, and avoid massaging deep bruises early on.",
    "Hamstring Strain Grade 2":
        "Stop activity immediately, use RICE (Rest, Ice, Compression, Elevation), avoid sprinting and aggressive stretching, and begin guided physiotherapy once pain decreases.",
    "Achilles Tendinitis":
        "Reduce running/jumping, apply ice after activity, use heel lifts or supportive shoes, perform eccentric calf strengthening, and see a sports doctor if pain persists.",
    "Calf Muscle Pull":
        "Rest from running, apply ice during the first 48 hours, use compression bandage, elevate the leg, and gradually return with gentle stretching and strengthening.",
    "High Ankle Sprain":
        "Avoid weight-bearing, use crutches if needed, apply ice and compression, keep the ankle elevated, and seek medical evaluation due to longer recovery risk.",
    "Ankle Fracture":
        "Do not walk on the ankle, immobilize it, avoid trying to straighten it, and go to the emergency department or orthopedic specialist immediately.",
    "ACL Tear":
        "Stop playing immediately, apply ice and compression to reduce swelling, keep the leg elevated, use crutches if needed, and consult an orthopedic surgeon promptly.",
    "Meniscus Tear":
        "Avoid twisting or deep squats, apply ice for pain and swelling, use a knee brace if advised, and see a specialist to decide between rehab and possible surgery.",
    "Plantar Fasciitis":
        "Reduce standing/running time, stretch the calf and plantar fascia regularly, use supportive shoes or orthotics, ice the heel after activity, and consider physiotherapy.",
    "Metatarsal Stress Fracture":
        "Stop impact sports, use stiff-soled shoes or a boot as recommended, avoid running/jumping, and consult a doctor for imaging and load-management plan.",
    "Compartment Syndrome":
        "This can be an emergency—stop activity immediately, keep the leg at heart level (not elevated), and seek urgent medical care, especially if pain is severe with numbness.",
    "Tibial Stress Reaction":
        "Cut back running volume, avoid hard surfaces, use cross-training with low impact (bike/swim), and gradually reload the shin under medical or physio supervision.",
    "Tennis Elbow":
        "Rest from gripping/lifting heavy objects, apply ice to the outside of the elbow, use a counterforce strap if advised, and follow eccentric forearm strengthening.",
    "Golfer's Elbow":
        "Reduce activities that stress the inside of the elbow, apply ice, gently stretch the wrist flexors, and start a strengthening program guided by a therapist.",
    "Rotator Cuff Tear":
        "Avoid overhead lifting and throwing, apply ice for pain, use a sling only short-term if needed, and see an orthopedic/shoulder specialist for imaging and rehab or surgery plan.",
    "Frozen Shoulder":
        "Keep the shoulder gently moving within pain limits, use heat before stretching and ice after, and follow a long-term physiotherapy program; consult a doctor for pain control.",
    "Wrist Sprain":
        "Rest from weight-bearing on the wrist, apply ice 10–15 minutes several times per day, use a wrist brace for support, and avoid heavy lifting until pain and strength improve.",
    "Carpal Tunnel Syndrome":
        "Use a night splint to keep the wrist neutral, avoid prolonged wrist flexion, take breaks from repetitive hand tasks, and see a doctor if numbness or weakness continues.",
    "Femur Fracture":
        "This is a medical emergency—do not move the leg unnecessarily, keep the person still, support the leg, and call emergency services immediately.",
    "IT Band Syndrome":
        "Reduce running, especially downhill, use ice on the outside of the knee/hip after activity, foam-roll the IT band and surrounding muscles, and strengthen hip abductors.",
    "Biceps Tendinitis":
        "Avoid overhead or heavy lifting, apply ice to the front of the shoulder, correct lifting/throwing technique, and follow a shoulder and scapular strengthening program.",
    "Triceps Strain":
        "Rest from pushing/pressing movements, use ice in the first 48 hours, apply light compression, and gradually add stretching and strengthening once pain decreases.",
    "AC Joint Separation":
        "Use a sling for comfort, apply ice on top of the shoulder, avoid overhead or cross-body movements early on, and see a doctor to grade the injury and guide return-to-sport.",
    "Patellar Tendinitis":
        "Reduce jumping and running, apply ice after training, use a patellar strap if recommended, and start eccentric quadriceps exercises and hip strengthening.",
    "Achilles Rupture":
        "You may feel a sudden pop—do not walk on the leg, keep the ankle supported, and go to emergency care or a specialist immediately for surgical/non-surgical management.",
    "Anterior Ankle Impingement":
        "Avoid deep squats and repeated dorsiflexion, apply ice after activity, work on ankle mobility and calf flexibility, and consult a sports clinician if pain persists.",
}

DOCTORS: tuple[DoctorRecord, ...] = tuple(
    DoctorRecord(doctor_id=index, doctor=doctor, specialty=DEFAULT_SPECIALTY)
    for index, doctor in enumerate(Doctor, start=1)
)


def all_injuries() -> list[Injury]:
    """Return every catalog injury in catalog order."""
    return list(_INJURIES)


def by_body_part(part: BodyPart | None) -> list[Injury]:
    """Return the injuries affecting ``part``, or the whole catalog when ``part`` is None."""
    if part is None:
        return all_injuries()
    return [injury for injury in _INJURIES if injury.body_part is part]


def find_injury(injury_type: str) -> Injury | None:
    for injury in _INJURIES:
        if injury.injury_type == injury_type:
            return injury
    return None


def treatment_for(injury_type: str) -> Treatment:
    """Look up the suggested treatment for an injury type.

    Matching is exact. Unknown types get a generic suggestion to consult a
    healthcare provider rather than an error.
    """
    suggestion = _TREATMENTS.get(injury_type)
    if suggestion is None:
        logger.debug("No treatment entry for injury type '{}'; using fallback", injury_type)
        suggestion = FALLBACK_TREATMENT
    return Treatment(injury_type=injury_type, suggestion=suggestion)


def all_sports() -> list[Sport]:
    return list(Sport)


def find_doctor(name: str) -> DoctorRecord | None:
    for record in DOCTORS:
        if record.name == name:
            return record
    return None
