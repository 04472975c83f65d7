"""dictionary words table

Revision ID: 0001_dictionary_words
Revises:
Create Date: 2026-10-19 00:00:00
"""

from alembic import op

# revision identifiers, used by Alembic.
revision = "0001_dictionary_words"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.execute(
        """
        CREATE TABLE IF NOT EXISTS words (
          id BIGSERIAL PRIMARY KEY,
          word TEXT NOT NULL,
          script TEXT NOT NULL CHECK (script IN ('latin', 'cyrillic', 'mixed')),
          trust_score SMALLINT NOT NULL DEFAULT 100 CHECK (trust_score BETWEEN 0 AND 100),
          is_checked BOOLEAN NOT NULL DEFAULT TRUE,
          owner TEXT NOT NULL DEFAULT 'System',
          frequency BIGINT NOT NULL DEFAULT 0,
          category TEXT NOT NULL DEFAULT 'other'
            CHECK (category IN ('noun', 'verb', 'adjective', 'adverb', 'other')),
          created_at TIMESTAMPTZ NOT NULL DEFAULT now(),
          updated_at TIMESTAMPTZ NOT NULL DEFAULT now()
        );

        CREATE INDEX IF NOT EXISTS idx_words_word_script ON words(word, script);
        CREATE INDEX IF NOT EXISTS idx_words_checked_trust ON words(trust_score DESC) WHERE is_checked;
        """
    )


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS words")
