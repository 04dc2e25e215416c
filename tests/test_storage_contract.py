"""Behaviour every storage backend must share."""

from datetime import datetime

from elearn.models.university import AcademicYear, Faculty
from elearn.models.user import UserRole
from elearn.schemas.course import MaterialCreate
from elearn.schemas.enrollment import EnrollmentCreate
from elearn.schemas.message import MessageCreate
from elearn.schemas.review import ReviewCreate
from elearn.schemas.university import UniversityCreate
from elearn.schemas.user import UserCreate, UserUpdate
from tests.factories import make_category, make_course, make_user


def test_create_university_fills_defaults(storage):
    university = storage.create_university(UniversityCreate(name="Damascus University", location="Damascus"))
    assert university.id == 1
    assert university.logo is None
    assert university.website is None
    assert isinstance(university.created_at, datetime)
    assert storage.get_university(university.id) == university
    assert storage.get_universities() == [university]


def test_create_user_defaults_and_lookup(storage):
    user = storage.create_user(make_user("alice"))
    assert user.id == 1
    assert user.role == UserRole.student
    assert user.uuid is not None
    for field in ("profile_picture", "bio", "experience", "university_id", "faculty", "academic_year", "student_id"):
        assert getattr(user, field) is None

    assert storage.get_user(user.id) == user
    assert storage.get_user_by_username("alice") == user
    assert storage.get_user_by_email("alice@example.com") == user


def test_user_role_defaults_to_student(storage):
    user = storage.create_user(UserCreate(username="bob", email="bob@example.com", password="pw", full_name="Bob"))
    assert user.role == UserRole.student


def test_unique_field_lookups_are_case_sensitive(storage):
    storage.create_user(make_user("alice"))
    assert storage.get_user_by_username("Alice") is None
    assert storage.get_user_by_email("ALICE@example.com") is None


def test_missing_records_return_none_or_empty(storage):
    assert storage.get_user(99) is None
    assert storage.get_university(99) is None
    assert storage.get_category_by_id(99) is None
    assert storage.get_course_by_id(99) is None
    assert storage.get_user_by_username("nobody") is None
    assert storage.get_courses_by_category(99) == []
    assert storage.get_materials_by_course(99) == []
    assert storage.get_enrollments_by_student(99) == []
    assert storage.get_reviews_by_course(99) == []
    assert storage.get_messages_by_user(99) == []


def test_ids_strictly_increase_per_entity(storage):
    categories = [storage.create_category(make_category(f"Category {i}")) for i in range(3)]
    course = storage.create_course(make_course())
    ids = [category.id for category in categories]
    assert ids == sorted(ids)
    assert len(set(ids)) == 3
    # Each entity type has its own counter
    assert course.id == 1


def test_ids_strictly_increase_for_every_entity_type(storage):
    def twice(create):
        first, second = create(0), create(1)
        assert first.id < second.id
        return second

    twice(lambda i: storage.create_university(UniversityCreate(name=f"University {i}", location="Damascus")))
    alice = twice(lambda i: storage.create_user(make_user(f"user{i}")))
    twice(lambda i: storage.create_category(make_category(f"Category {i}")))
    course = twice(lambda i: storage.create_course(make_course(f"Course {i}")))
    twice(lambda i: storage.create_material(
        MaterialCreate(course_id=course.id, title=f"Part {i}", type="video", url=f"https://x/{i}")
    ))
    bob = storage.create_user(make_user("bob"))
    twice(lambda i: storage.create_enrollment(
        EnrollmentCreate(student_id=(alice, bob)[i].id, course_id=course.id)
    ))
    twice(lambda i: storage.create_review(ReviewCreate(course_id=course.id, student_id=alice.id, rating=i + 1)))
    twice(lambda i: storage.create_message(
        MessageCreate(sender_id=alice.id, receiver_id=bob.id, content=f"message {i}")
    ))


def test_update_user_replaces_mutable_fields(storage):
    user = storage.create_user(make_user("carol", bio="old bio", faculty=Faculty.science))
    updated = storage.update_user(
        user.id,
        UserUpdate(
            username="carol2",
            email="carol2@example.com",
            password="new",
            role=UserRole.teacher,
            full_name="Carol Two",
            academic_year=AcademicYear.second,
        ),
    )
    assert updated.id == user.id
    assert updated.uuid == user.uuid
    assert updated.username == "carol2"
    assert updated.role == UserRole.teacher
    # Full replace: omitted optional fields are reset
    assert updated.bio is None
    assert updated.faculty is None
    assert updated.academic_year == AcademicYear.second
    assert storage.get_user(user.id) == updated
    assert storage.get_user_by_username("carol") is None


def test_update_unknown_user_returns_none(storage):
    assert storage.update_user(42, UserUpdate(**make_user("ghost").model_dump())) is None


def test_get_teachers_returns_teachers_in_creation_order(storage):
    storage.create_user(make_user("student1"))
    t1 = storage.create_user(make_user("teacher1", role=UserRole.teacher))
    storage.create_user(make_user("admin1", role=UserRole.admin))
    t2 = storage.create_user(make_user("teacher2", role=UserRole.teacher))

    assert [teacher.id for teacher in storage.get_teachers()] == [t1.id, t2.id]


def test_courses_by_category_scenario(storage):
    teacher = storage.create_user(make_user("teacher", role=UserRole.teacher))
    math = storage.create_category(make_category("Math"))
    storage.create_category(make_category("Art"))
    course = storage.create_course(make_course(category_id=math.id, teacher_id=teacher.id))
    storage.create_course(make_course("Unfiled"))

    assert storage.get_courses_by_category(math.id) == [course]
    assert storage.get_courses_by_teacher(teacher.id) == [course]
    assert len(storage.get_courses()) == 2


def test_course_defaults(storage):
    course = storage.create_course(make_course())
    assert course.is_official is False
    for field in ("thumbnail", "category_id", "teacher_id", "university_id", "faculty", "academic_year", "course_code"):
        assert getattr(course, field) is None
    assert storage.get_course_by_id(course.id) == course


def test_foreign_keys_are_returned_as_raw_ids(storage):
    category = storage.create_category(make_category())
    course = storage.create_course(make_course(category_id=category.id))
    fetched = storage.get_course_by_id(course.id)
    assert fetched.category_id == category.id
    assert not hasattr(fetched, "category")


def test_materials_by_course(storage):
    course = storage.create_course(make_course())
    other = storage.create_course(make_course("Geometry"))
    video = storage.create_material(MaterialCreate(course_id=course.id, title="Intro", type="video", url="https://x/1"))
    storage.create_material(MaterialCreate(course_id=other.id, title="Notes", type="pdf", url="https://x/2"))

    assert storage.get_materials_by_course(course.id) == [video]


def test_enrollments_for_two_students_scenario(storage):
    course = storage.create_course(make_course())
    alice = storage.create_user(make_user("alice"))
    bob = storage.create_user(make_user("bob"))
    first = storage.create_enrollment(EnrollmentCreate(student_id=alice.id, course_id=course.id))
    second = storage.create_enrollment(EnrollmentCreate(student_id=bob.id, course_id=course.id))

    assert first.is_completed is False
    assert isinstance(first.enrolled_at, datetime)
    assert storage.get_enrollments_by_course(course.id) == [first, second]
    assert storage.get_enrollments_by_student(alice.id) == [first]


def test_reviews_by_course(storage):
    course = storage.create_course(make_course())
    student = storage.create_user(make_user("alice"))
    review = storage.create_review(ReviewCreate(course_id=course.id, student_id=student.id, rating=4))

    assert review.comment is None
    assert isinstance(review.created_at, datetime)
    assert storage.get_reviews_by_course(course.id) == [review]


def test_messages_sent_then_received(storage):
    alice = storage.create_user(make_user("alice"))
    bob = storage.create_user(make_user("bob"))
    carol = storage.create_user(make_user("carol"))

    m1 = storage.create_message(MessageCreate(sender_id=alice.id, receiver_id=bob.id, content="hi bob"))
    m2 = storage.create_message(MessageCreate(sender_id=bob.id, receiver_id=alice.id, content="hi alice"))
    m3 = storage.create_message(MessageCreate(sender_id=alice.id, receiver_id=carol.id, content="hi carol"))
    storage.create_message(MessageCreate(sender_id=bob.id, receiver_id=carol.id, content="not for alice"))

    assert m1.is_read is False
    assert isinstance(m1.sent_at, datetime)
    assert [m.id for m in storage.get_messages_by_user(alice.id)] == [m1.id, m3.id, m2.id]


def test_message_to_self_is_listed_once(storage):
    alice = storage.create_user(make_user("alice"))
    note = storage.create_message(MessageCreate(sender_id=alice.id, receiver_id=alice.id, content="reminder"))

    assert [m.id for m in storage.get_messages_by_user(alice.id)] == [note.id]


def test_mark_message_as_read_is_idempotent(storage):
    alice = storage.create_user(make_user("alice"))
    bob = storage.create_user(make_user("bob"))
    message = storage.create_message(MessageCreate(sender_id=alice.id, receiver_id=bob.id, content="hello"))

    assert storage.mark_message_as_read(message.id) is None
    assert storage.get_messages_by_user(bob.id)[0].is_read is True
    storage.mark_message_as_read(message.id)
    assert storage.get_messages_by_user(bob.id)[0].is_read is True


def test_mark_unknown_message_as_read_is_noop(storage):
    alice = storage.create_user(make_user("alice"))
    bob = storage.create_user(make_user("bob"))
    message = storage.create_message(MessageCreate(sender_id=alice.id, receiver_id=bob.id, content="hello"))

    storage.mark_message_as_read(999)
    storage.mark_message_as_read(999)
    assert storage.get_messages_by_user(alice.id) == [message]
