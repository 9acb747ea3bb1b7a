from .shared import printf
from .table import HashTable


def print_table(table: HashTable):
    for index, chain in enumerate(table.buckets):
        printf("{0:d}:\t", index)
        for key in chain:
            printf("{0:s}\t", key)
        printf("\n")


def print_stats(table: HashTable):
    stats = table.stats()
    printf("size:\t\t\t{0:d}\n", stats.size)
    printf("inserts:\t\t{0:d}\n", stats.inserts)
    printf("load factor:\t{0:g}\n", stats.load_factor)
    printf("collisions:\t\t{0:d}\n", stats.collisions)
    printf("max. bucket:\t{0:d}\n", stats.max_bucket)
