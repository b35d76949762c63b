#!/usr/bin/env python3
"""
Laporan Penomoran Surat Keluar
Cek jumlah surat, nomor berikutnya, dan gap nomor urut untuk satu tahun.

Usage:
    python scripts/cek_nomor.py            # tahun berjalan
    python scripts/cek_nomor.py 2025
"""

import argparse
import sys
from datetime import date
from pathlib import Path
import logging

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from suratkeluar.database import SessionLocal
from suratkeluar.models import SuratKeluar
from suratkeluar.services.surat import gap_nomor, next_nomor_urut

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def laporan_nomor(db, tahun: int) -> dict:
    """Kumpulkan ringkasan penomoran satu tahun."""
    return {
        "tahun": tahun,
        "total": db.query(SuratKeluar).filter(SuratKeluar.tahun == tahun).count(),
        "next_nomor": next_nomor_urut(db, tahun),
        "gaps": gap_nomor(db, tahun),
    }


def check_nomor(tahun: int, db=None) -> bool:
    own_session = db is None
    if own_session:
        db = SessionLocal()
    try:
        laporan = laporan_nomor(db, tahun)

        logger.info(f'Tahun: {laporan["tahun"]}')
        logger.info(f'Jumlah surat: {laporan["total"]}')
        logger.info(f'Nomor berikutnya: {laporan["next_nomor"]}')

        gaps = laporan["gaps"]
        if gaps:
            logger.warning(f'Gap nomor ditemukan ({len(gaps)} nomor):')
            for nomor in gaps[:20]:
                logger.warning(f'  - {nomor}')
            if len(gaps) > 20:
                logger.warning(f'  ... and {len(gaps) - 20} more')
            return False

        logger.info('Tidak ada gap nomor')
        return True

    finally:
        if own_session:
            db.close()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Laporan gap nomor surat keluar")
    parser.add_argument('tahun', nargs='?', type=int, default=date.today().year)
    args = parser.parse_args(argv)

    logger.info('Starting numbering check...')
    return 0 if check_nomor(args.tahun) else 1


if __name__ == '__main__':
    sys.exit(main())
