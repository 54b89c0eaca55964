"""Reference catalog inserted by the seeder."""

from typing import List

from .schemas import Book

SAMPLE_BOOKS: List[Book] = [
    Book(
        title="The Silent Orchard",
        author="Ava Harper",
        genre="Fiction",
        published_year=2018,
        price=14.99,
        in_stock=True,
        pages=320,
        publisher="Harbor Press",
    ),
    Book(
        title="Learning MongoDB",
        author="Samuel Reed",
        genre="Non-Fiction",
        published_year=2021,
        price=39.5,
        in_stock=True,
        pages=280,
        publisher="TechBooks",
    ),
    Book(
        title="Galaxies Apart",
        author="Maya Chen",
        genre="Science Fiction",
        published_year=2012,
        price=12.0,
        in_stock=False,
        pages=410,
        publisher="Orbit House",
    ),
    Book(
        title="The Last Alchemist",
        author="Ava Harper",
        genre="Fantasy",
        published_year=2005,
        price=9.99,
        in_stock=True,
        pages=450,
        publisher="Mythic Press",
    ),
    Book(
        title="Mysteries of Grey Manor",
        author="Derek Cole",
        genre="Mystery",
        published_year=2016,
        price=11.5,
        in_stock=False,
        pages=370,
        publisher="Detective House",
    ),
    Book(
        title="A Short History of Timekeeping",
        author="Nina Patel",
        genre="History",
        published_year=1998,
        price=24.0,
        in_stock=True,
        pages=220,
        publisher="Chronicle Pub",
    ),
    Book(
        title="Romance on 5th Avenue",
        author="Liam Brooks",
        genre="Romance",
        published_year=2019,
        price=7.99,
        in_stock=True,
        pages=300,
        publisher="LoveReads",
    ),
    Book(
        title="Data Patterns in the Wild",
        author="Samuel Reed",
        genre="Non-Fiction",
        published_year=2015,
        price=45.0,
        in_stock=False,
        pages=500,
        publisher="TechBooks",
    ),
    Book(
        title="Echoes of Tomorrow",
        author="Maya Chen",
        genre="Science Fiction",
        published_year=2020,
        price=18.75,
        in_stock=True,
        pages=360,
        publisher="Orbit House",
    ),
    Book(
        title="Memoirs of a Voyager",
        author="Isabella Stone",
        genre="Biography",
        published_year=2002,
        price=16.0,
        in_stock=True,
        pages=410,
        publisher="LifeStory Press",
    ),
    Book(
        title="Practical Indexing",
        author="Samuel Reed",
        genre="Non-Fiction",
        published_year=2010,
        price=29.99,
        in_stock=True,
        pages=200,
        publisher="TechBooks",
    ),
    Book(
        title="Shadows Under the Ivy",
        author="Derek Cole",
        genre="Mystery",
        published_year=2022,
        price=13.5,
        in_stock=True,
        pages=330,
        publisher="Detective House",
    ),
]
