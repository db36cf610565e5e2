from .models import Book

# Sample data inserted on first start; see BookRepository.seed.
SEED_BOOKS = [
    Book(
        id="example1",
        title="The Vortex",
        author="José Eustasio Rivera",
        edition="958-30-0804-4",
        pages="292",
        year="1924",
    ),
    Book(
        id="example2",
        title="Frankenstein",
        author="Mary Shelley",
        edition="978-3-649-64609-9",
        pages="280",
        year="1818",
    ),
    Book(
        id="example3",
        title="The Black Cat",
        author="Edgar Allan Poe",
        edition="978-3-99168-238-7",
        pages="280",
        year="1843",
    ),
]
