from sqlalchemy import Column, Integer, String, Enum as SQLEnum
from sqlalchemy.orm import declarative_base

from destiny_bot.data_models.items import (
    Armor, ArmorSlot, Rarity, Weapon, WeaponCategory, WeaponType
)

Base = declarative_base()

class WeaponRecord(Base):
    __tablename__ = 'weapons'
    
    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(200), nullable=False, index=True)
    weapon_type = Column(SQLEnum(WeaponType), nullable=False)
    category = Column(SQLEnum(WeaponCategory), nullable=False)
    rarity = Column(SQLEnum(Rarity), nullable=False)
    
    def to_weapon(self) -> Weapon:
        return Weapon(
            id=self.id,
            name=self.name,
            type=self.weapon_type,
            category=self.category,
            rarity=self.rarity
        )
    
    @classmethod
    def from_weapon(cls, weapon: Weapon) -> 'WeaponRecord':
        return cls(
            id=weapon.id,
            name=weapon.name,
            weapon_type=weapon.type,
            category=weapon.category,
            rarity=weapon.rarity
        )
    
    def __repr__(self):
        return f"<WeaponRecord(id={self.id}, name='{self.name}')>"

class ArmorRecord(Base):
    __tablename__ = 'armor_pieces'
    
    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(200), nullable=False, index=True)
    rarity = Column(SQLEnum(Rarity), nullable=False)
    slot = Column(SQLEnum(ArmorSlot), nullable=False)
    
    def to_armor(self) -> Armor:
        return Armor(id=self.id, name=self.name, rarity=self.rarity, slot=self.slot)
    
    @classmethod
    def from_armor(cls, armor: Armor) -> 'ArmorRecord':
        return cls(id=armor.id, name=armor.name, rarity=armor.rarity, slot=armor.slot)
    
    def __repr__(self):
        return f"<ArmorRecord(id={self.id}, name='{self.name}')>"
